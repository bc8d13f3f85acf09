"""
sprout.runtime - The Sprout Runtime Library

Submodules:
- types: Reader form types (Symbol, Keyword, VectorLiteral, etc.)
- core: Helpers called by destructuring code (first, rest, get, nth)

The compiler (sprout.compiler) depends on runtime.types for forms,
but the runtime has no load-time dependency on the compiler.
"""

from sprout.runtime.core import first, get, nth, rest, run_plan
from sprout.runtime.types import (
    ArrayLiteral,
    Keyword,
    MapLiteral,
    Symbol,
    VectorLiteral,
)

__all__ = [
    "ArrayLiteral",
    "Keyword",
    "MapLiteral",
    "Symbol",
    "VectorLiteral",
    "first",
    "get",
    "nth",
    "rest",
    "run_plan",
]
