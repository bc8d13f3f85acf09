"""
sprout.compiler.plan - Binding plans produced by the destructuring compiler

A BindingPlan is an ordered list of (target symbol, value expression)
bindings. Later values may refer to earlier targets, so the code generator
must emit the plan as sequential assignments in plan order.

Value expressions are either the caller's source expression, a Symbol
referring to an earlier target, or an Access node describing one of the
runtime helper calls first/rest/keyed/indexed access.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional

from sprout.compiler.location import SourceList, copy_location
from sprout.project.config import CompilerConfig
from sprout.runtime.types import Symbol


class AccessKind(Enum):
    FIRST = "first-of"
    REST = "rest-of"
    KEYED = "keyed-access"
    INDEXED = "indexed-access"


@dataclass
class Access:
    """
    A runtime helper call reading part of the value bound to `target`.

    Attributes:
        kind: Which helper is called
        target: Symbol of the value being read
        key: Map key or array index (KEYED and INDEXED only)
        line, col, end_line, end_col: Span of the pattern node this came from
    """

    kind: AccessKind
    target: Symbol
    key: Any = None
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)
    end_line: int = field(default=0, compare=False)
    end_col: int = field(default=0, compare=False)

    def __repr__(self):
        if self.kind in (AccessKind.KEYED, AccessKind.INDEXED):
            return f"{self.kind.value}({self.target!r}, {self.key!r})"
        return f"{self.kind.value}({self.target!r})"

    def to_form(self, config: Optional[CompilerConfig] = None) -> SourceList:
        """Lower to a call form such as (first t1) or (get t1 :k)."""
        config = config or CompilerConfig()
        fn_name = {
            AccessKind.FIRST: config.first_fn,
            AccessKind.REST: config.rest_fn,
            AccessKind.KEYED: config.keyed_fn,
            AccessKind.INDEXED: config.indexed_fn,
        }[self.kind]
        fn = copy_location(Symbol(fn_name), self)
        items: list[Any] = [fn, self.target]
        if self.kind in (AccessKind.KEYED, AccessKind.INDEXED):
            items.append(self.key)
        return copy_location(SourceList(items), self)


@dataclass
class Binding:
    target: Symbol
    value: Any

    def __iter__(self):
        # Allows `target, value = binding`
        return iter((self.target, self.value))


@dataclass
class BindingPlan:
    """Ordered bindings to be emitted as sequential assignments."""

    bindings: list[Binding] = field(default_factory=list)

    def add(self, target: Symbol, value: Any) -> Symbol:
        self.bindings.append(Binding(target, value))
        return target

    def targets(self) -> list[Symbol]:
        return [b.target for b in self.bindings]

    def __iter__(self) -> Iterator[Binding]:
        return iter(self.bindings)

    def __len__(self):
        return len(self.bindings)

    def __getitem__(self, index):
        return self.bindings[index]

    def to_forms(self, config: Optional[CompilerConfig] = None) -> list[Any]:
        """Flatten to [target value target value ...] with helper calls lowered."""
        forms: list[Any] = []
        for target, value in self.bindings:
            forms.append(target)
            forms.append(value.to_form(config) if isinstance(value, Access) else value)
        return forms

    def format(self) -> str:
        """Render one `target = value` line per binding, for diagnostics."""
        return "\n".join(f"{b.target!r} = {b.value!r}" for b in self.bindings)
