"""
sprout.compiler.location - Source span tracking for forms and generated nodes

Components:
- SourceLocation: Holds line/column information for error messages
- SourceList: A list that carries source location information, used for
  call forms such as (first t1) built by the compiler
- get_source_location(): Extract the span of any form that carries one
- set_location() / copy_location(): Attach a span to a generated node
"""

from dataclasses import dataclass
from typing import Optional, TypeVar

# =============================================================================
# Source Location Tracking
# =============================================================================


@dataclass
class SourceLocation:
    """Holds source location information for debugging and error messages."""

    line: int = 0  # 1-based line number
    col: int = 0  # 0-based column offset
    end_line: int = 0
    end_col: int = 0

    def __repr__(self):
        return f"SourceLocation({self.line}:{self.col})"


class SourceList(list):
    """A list subclass that carries source location information.

    Used to represent S-expressions (parenthesized lists) while
    preserving source location for error messages.
    """

    __slots__ = ("line", "col", "end_line", "end_col")

    def __init__(self, items=None, line=0, col=0, end_line=0, end_col=0):
        super().__init__(items if items is not None else [])
        self.line = line
        self.col = col
        self.end_line = end_line
        self.end_col = end_col

    def get_location(self) -> SourceLocation:
        return SourceLocation(self.line, self.col, self.end_line, self.end_col)


# =============================================================================
# Source Location Utilities
# =============================================================================


def get_source_location(form) -> Optional[SourceLocation]:
    """Extract source location from a form if available.

    Forms read without position information (line 0) have no location.
    """
    if isinstance(form, SourceLocation):
        return form if form.line > 0 else None
    if isinstance(form, SourceList):
        return form.get_location() if form.line > 0 else None
    if hasattr(form, "line") and hasattr(form, "col"):
        if not form.line:
            return None
        end_line = getattr(form, "end_line", form.line)
        end_col = getattr(form, "end_col", form.col)
        return SourceLocation(form.line, form.col, end_line, end_col)
    return None


_T = TypeVar("_T")


def set_location(node: _T, loc: Optional[SourceLocation]) -> _T:
    """Set the source location on a form or generated node."""
    if loc is not None and loc.line > 0:
        node.line = loc.line  # type: ignore[attr-defined]
        node.col = loc.col  # type: ignore[attr-defined]
        node.end_line = loc.end_line or loc.line  # type: ignore[attr-defined]
        node.end_col = loc.end_col  # type: ignore[attr-defined]
    return node


def copy_location(node: _T, form) -> _T:
    """Copy source location from a form to a generated node."""
    loc = get_source_location(form)
    return set_location(node, loc)
