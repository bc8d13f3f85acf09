"""
sprout.compiler.destructure - Expansion of binding patterns into binding plans

PatternCompiler turns (pattern, value) pairs from let-style binding forms
into a flat BindingPlan:

    [a b] <- v        t1 = v
                      t2 = first-of(t1)
                      t3 = rest-of(t1)
                      a = t2
                      t4 = first-of(t3)
                      t5 = rest-of(t3)
                      b = t4

Supports:
- Simple binding: a -> single binding
- Wildcard: _ -> binding to a fresh symbol (keeps evaluation of the value)
- Sequence destructuring: [a b & rest] -> first/rest traversal, rest capture
  (a trailing & captures nothing)
- Map destructuring: {:x a :y b} -> keyed access
- Indexed destructuring: @[0 a 2 b] -> indexed access
- Nested patterns: [[a b] {:c c}] -> recursive destructuring
"""

import logging
from enum import Enum, auto
from typing import Any, Iterable, Optional, assert_never

from sprout.compiler.errors import (
    BindingArityError,
    MalformedRestError,
)
from sprout.compiler.gensym import GensymAllocator, gensym
from sprout.compiler.location import copy_location
from sprout.compiler.patterns import (
    IndexedPattern,
    MapPattern,
    Pattern,
    RestMarker,
    SequencePattern,
    SymbolPattern,
    pattern_from_form,
)
from sprout.compiler.plan import Access, AccessKind, BindingPlan
from sprout.project.config import CompilerConfig
from sprout.runtime.types import ArrayLiteral, MapLiteral, VectorLiteral

logger = logging.getLogger(__name__)


class RestState(Enum):
    """Position of the sequence walk relative to the rest marker."""

    BEFORE_REST = auto()
    AT_REST_TARGET = auto()
    DONE = auto()


class PatternCompiler:
    """
    Expands binding patterns into a BindingPlan.

    Fresh symbols come from `allocator`, or from the current gensym session
    when none is given. Each generated symbol carries the span of the
    pattern node it was derived from.
    """

    def __init__(
        self,
        allocator: Optional[GensymAllocator] = None,
        config: Optional[CompilerConfig] = None,
    ):
        self.allocator = allocator
        self.config = config or CompilerConfig()

    def compile(self, pairs: Iterable[tuple[Any, Any]]) -> BindingPlan:
        """
        Compile (pattern, value) pairs, in order, into one plan.

        Patterns may be Pattern values or reader forms.

        Raises:
            UnsupportedPatternError: a pattern is not one of the four shapes
            MalformedRestError: more than one pattern follows &
        """
        plan = BindingPlan()
        for pattern, value in pairs:
            self.destructure(plan, self.as_pattern(pattern), value)
        logger.debug("compiled binding plan with %d bindings", len(plan))
        return plan

    def compile_bindings(self, forms) -> BindingPlan:
        """Compile a flat binding vector [p1 v1 p2 v2 ...]."""
        items = list(forms)
        if len(items) % 2 != 0:
            raise BindingArityError(
                "Bindings must have an even number of forms", forms
            )
        return self.compile(zip(items[0::2], items[1::2]))

    def as_pattern(self, form) -> Pattern:
        return pattern_from_form(form, self.config.rest_marker)

    def gensym(self, location=None):
        if self.allocator is None:
            return gensym(self.config.gensym_prefix, location)
        return self.allocator.gen(self.config.gensym_prefix, location)

    def destructure(self, plan: BindingPlan, pattern: Pattern, value: Any) -> None:
        """Append the bindings for `pattern` against `value` to `plan`."""
        if isinstance(pattern, SymbolPattern):
            self.process_symbol(plan, pattern, value)
        elif isinstance(pattern, SequencePattern):
            self.process_sequence(plan, pattern, value)
        elif isinstance(pattern, MapPattern):
            self.process_keyed(plan, pattern, value, pattern.entries, AccessKind.KEYED)
        elif isinstance(pattern, IndexedPattern):
            self.process_keyed(
                plan, pattern, value, pattern.entries, AccessKind.INDEXED
            )
        else:
            assert_never(pattern)

    def process_symbol(self, plan: BindingPlan, pattern: SymbolPattern, value) -> None:
        if pattern.is_wildcard(self.config.wildcard):
            plan.add(self.gensym(pattern), value)
        else:
            plan.add(pattern.to_symbol(), value)

    def process_sequence(self, plan: BindingPlan, pattern: SequencePattern, value) -> None:
        cursor = plan.add(self.gensym(pattern), value)
        state = RestState.BEFORE_REST

        for element in pattern.elements:
            if state is RestState.BEFORE_REST:
                if isinstance(element, RestMarker):
                    state = RestState.AT_REST_TARGET
                    continue
                first = plan.add(
                    self.gensym(element),
                    self._access(AccessKind.FIRST, cursor, element),
                )
                cursor = plan.add(
                    self.gensym(element),
                    self._access(AccessKind.REST, cursor, element),
                )
                self.destructure(plan, self._element(element, pattern), first)
            elif state is RestState.AT_REST_TARGET:
                state = RestState.DONE
                self.destructure(plan, self._element(element, pattern), cursor)
            else:
                raise self._malformed_rest(pattern)

    def process_keyed(
        self, plan: BindingPlan, pattern: Pattern, value, entries, kind: AccessKind
    ) -> None:
        whole = plan.add(self.gensym(pattern), value)
        for key, sub_pattern in entries:
            part = plan.add(self.gensym(pattern), self._access(kind, whole, pattern, key))
            self.destructure(plan, self.as_pattern(sub_pattern), part)

    def _element(self, element, pattern: SequencePattern) -> Pattern:
        if isinstance(element, RestMarker):
            raise self._malformed_rest(pattern)
        return self.as_pattern(element)

    @staticmethod
    def _malformed_rest(pattern: SequencePattern) -> MalformedRestError:
        return MalformedRestError(
            "Unsupported binding form, only one symbol can follow the & parameter",
            pattern,
        )

    @staticmethod
    def _access(kind: AccessKind, target, node, key=None) -> Access:
        return copy_location(Access(kind, target, key), node)


def compile_destructure(
    pattern,
    value,
    allocator: Optional[GensymAllocator] = None,
    config: Optional[CompilerConfig] = None,
) -> BindingPlan:
    """Compile a single (pattern, value) pair into a BindingPlan."""
    return PatternCompiler(allocator, config).compile([(pattern, value)])


def is_destructuring_pattern(form) -> bool:
    """Check if a form is a composite pattern (anything but a plain symbol)."""
    return isinstance(
        form,
        (SequencePattern, MapPattern, IndexedPattern, VectorLiteral, MapLiteral, ArrayLiteral),
    )
