"""
sprout.compiler.patterns - Binding pattern shapes

A binding pattern is one of four shapes:

    SymbolPattern     a            bind (or discard, for _) the whole value
    SequencePattern   [a b & r]    ordered first/rest traversal
    MapPattern        {:k a}       keyed access
    IndexedPattern    @[0 a 2 b]   indexed access

`Pattern` is the closed union of these classes. Reader forms are turned into
patterns by pattern_from_form(); anything else is rejected there with
UnsupportedPatternError.
"""

from dataclasses import dataclass, field
from typing import Any, Union

from sprout.compiler.errors import UnsupportedPatternError
from sprout.runtime.types import ArrayLiteral, MapLiteral, Symbol, VectorLiteral

WILDCARD = "_"
REST_MARKER = "&"


@dataclass
class SymbolPattern:
    name: str
    line: int = 0
    col: int = 0
    end_line: int = 0
    end_col: int = 0

    def is_wildcard(self, wildcard: str = WILDCARD) -> bool:
        return self.name == wildcard

    def to_symbol(self) -> Symbol:
        return Symbol(self.name, self.line, self.col, self.end_line, self.end_col)


@dataclass
class RestMarker:
    """The & element of a sequence pattern."""

    line: int = 0
    col: int = 0
    end_line: int = 0
    end_col: int = 0


@dataclass
class SequencePattern:
    elements: list[Union["Pattern", RestMarker]] = field(default_factory=list)
    line: int = 0
    col: int = 0
    end_line: int = 0
    end_col: int = 0

    @property
    def has_rest(self) -> bool:
        return any(isinstance(e, RestMarker) for e in self.elements)


@dataclass
class MapPattern:
    entries: list[tuple[Any, "Pattern"]] = field(default_factory=list)
    line: int = 0
    col: int = 0
    end_line: int = 0
    end_col: int = 0


@dataclass
class IndexedPattern:
    entries: list[tuple[Any, "Pattern"]] = field(default_factory=list)
    line: int = 0
    col: int = 0
    end_line: int = 0
    end_col: int = 0


Pattern = Union[SymbolPattern, SequencePattern, MapPattern, IndexedPattern]

PATTERN_TYPES = (SymbolPattern, SequencePattern, MapPattern, IndexedPattern)


def _span(form) -> dict[str, int]:
    return {
        "line": getattr(form, "line", 0),
        "col": getattr(form, "col", 0),
        "end_line": getattr(form, "end_line", 0),
        "end_col": getattr(form, "end_col", 0),
    }


def pattern_from_form(form, rest_marker: str = REST_MARKER) -> Pattern:
    """
    Convert a reader form in binding position into a Pattern.

    - Symbol -> SymbolPattern
    - VectorLiteral -> SequencePattern (the rest marker symbol becomes RestMarker)
    - MapLiteral -> MapPattern, pairs read as (key, pattern)
    - ArrayLiteral -> IndexedPattern, items read as alternating index, pattern

    Patterns are passed through unchanged.

    Raises:
        UnsupportedPatternError: for any other form, with its span if it has one
    """
    if isinstance(form, PATTERN_TYPES):
        return form

    if isinstance(form, Symbol):
        return SymbolPattern(form.name, **_span(form))

    if isinstance(form, VectorLiteral):
        elements: list[Union[Pattern, RestMarker]] = []
        for item in form.items:
            if isinstance(item, Symbol) and item.name == rest_marker:
                elements.append(RestMarker(**_span(item)))
            else:
                elements.append(pattern_from_form(item, rest_marker))
        return SequencePattern(elements, **_span(form))

    if isinstance(form, MapLiteral):
        entries = [(key, pattern_from_form(value, rest_marker)) for key, value in form.pairs]
        return MapPattern(entries, **_span(form))

    if isinstance(form, ArrayLiteral):
        items = form.items
        if len(items) % 2 != 0:
            raise UnsupportedPatternError(
                form, "Indexed binding form requires index/pattern pairs"
            )
        entries = [
            (items[i], pattern_from_form(items[i + 1], rest_marker))
            for i in range(0, len(items), 2)
        ]
        return IndexedPattern(entries, **_span(form))

    raise UnsupportedPatternError(form)
