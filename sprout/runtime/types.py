"""
sprout.runtime.types - Core form types for Sprout

This module contains the reader form types shared by the compiler and the
runtime:
- Symbol: Represents symbolic identifiers (user-named or generated)
- Keyword: Interned symbols that evaluate to themselves (:keyword)
- VectorLiteral: Reader representation of vector literals [...]
- MapLiteral: Reader representation of map literals {...}
- ArrayLiteral: Reader representation of indexed array literals @[...]

Every form carries an optional source span (line, col, end_line, end_col).
Spans never take part in equality: two symbols with the same name are the
same symbol wherever they were read.
"""

from dataclasses import dataclass
from typing import Any

@dataclass(eq=False)
class Symbol:
    """
    Represents a symbolic identifier in Sprout code.

    Symbols name binding targets. Generated symbols (gensyms) are ordinary
    symbols whose names cannot be written by users.

    Attributes:
        name: The string name of the symbol
        line: Source line number (1-based)
        col: Source column number (0-based)
        end_line: Ending line number
        end_col: Ending column number
    """

    name: str
    line: int = 0
    col: int = 0
    end_line: int = 0
    end_col: int = 0

    def __repr__(self):
        return self.name

    def __eq__(self, other):
        if isinstance(other, Symbol):
            return self.name == other.name
        return False

    def __hash__(self):
        return hash(("Symbol", self.name))


@dataclass(eq=False)
class Keyword:
    """
    Keyword type - interned symbols that evaluate to themselves and can be
    used as map keys.

    Keywords compare equal by name only (source location is ignored).

    Attributes:
        name: The string name of the keyword (without the leading colon)
        line: Source line number (1-based)
        col: Source column number (0-based)
        end_line: Ending line number
        end_col: Ending column number
    """

    name: str
    line: int = 0
    col: int = 0
    end_line: int = 0
    end_col: int = 0

    def __repr__(self):
        return f":{self.name}"

    def __str__(self):
        return f":{self.name}"

    def __eq__(self, other):
        if isinstance(other, Keyword):
            return self.name == other.name
        return False

    def __hash__(self):
        return hash(("Keyword", self.name))


@dataclass
class VectorLiteral:
    """
    Reader node for a vector literal [...] in source code.

    In binding position a vector is a sequence pattern: [a b & more].

    Attributes:
        items: List of elements in the vector
        line: Source line number
        col: Source column number
        end_line: Ending line number
        end_col: Ending column number
    """

    items: list[Any]
    line: int = 0
    col: int = 0
    end_line: int = 0
    end_col: int = 0

    def __repr__(self):
        return f"VectorLiteral({self.items!r})"

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]


@dataclass
class MapLiteral:
    """
    Represents a map literal that preserves the order of its key-value pairs.

    In binding position a map is a keyed pattern: {:x a :y [b c]} binds
    the value at :x to a and destructures the value at :y.

    Attributes:
        pairs: List of (key, value) tuples in the order they appeared
        line: Source line number
        col: Source column number
        end_line: Ending line number
        end_col: Ending column number
    """

    pairs: list[tuple[Any, Any]]
    line: int = 0
    col: int = 0
    end_line: int = 0
    end_col: int = 0

    def __repr__(self):
        return f"MapLiteral({self.pairs!r})"


@dataclass
class ArrayLiteral:
    """
    Reader node for an indexed array literal @[...] in source code.

    In binding position the items alternate index and pattern:
    @[0 a 2 b] binds element 0 to a and element 2 to b.

    Attributes:
        items: Flat list of alternating index/pattern items
        line: Source line number
        col: Source column number
        end_line: Ending line number
        end_col: Ending column number
    """

    items: list[Any]
    line: int = 0
    col: int = 0
    end_line: int = 0
    end_col: int = 0

    def __repr__(self):
        return f"ArrayLiteral({self.items!r})"

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)


# Type exports
__all__ = [
    "Symbol",
    "Keyword",
    "VectorLiteral",
    "MapLiteral",
    "ArrayLiteral",
]
