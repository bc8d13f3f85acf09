"""
sprout.compiler.gensym - Fresh symbol allocation

A GensymAllocator issues symbols whose names are unique for the lifetime of
one compilation session. Each compilation session owns its allocator:
gensym_session() installs a fresh one for the current context so that two
independent compilations (or two test cases) produce the same names.
"""

import itertools
import logging
import threading
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from sprout.compiler.location import copy_location
from sprout.runtime.types import Symbol

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "__destructure_"


class GensymAllocator:
    """Issues fresh, session-unique symbols.

    The counter is advanced under a lock so one allocator can be shared by
    threads compiling parts of the same session.
    """

    def __init__(self, prefix: str = DEFAULT_PREFIX):
        self.prefix = prefix
        self._lock = threading.Lock()
        self._counter = itertools.count(1)

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)

    def gen(self, prefix: Optional[str] = None, location=None) -> Symbol:
        """
        Generate a fresh symbol.

        Args:
            prefix: Name prefix; defaults to the allocator's prefix
            location: A form (or SourceLocation) whose span the symbol inherits

        Returns:
            A Symbol named prefix + counter
        """
        name = f"{self.prefix if prefix is None else prefix}{self.next_id()}"
        return copy_location(Symbol(name), location)

    def reset(self) -> None:
        """Restart the counter at 1."""
        with self._lock:
            self._counter = itertools.count(1)
        logger.debug("gensym counter reset (prefix %r)", self.prefix)


# Session-scoped allocator using contextvars
_allocator_var: ContextVar[Optional[GensymAllocator]] = ContextVar(
    "_gensym_allocator", default=None
)


def current_allocator() -> GensymAllocator:
    """Get the allocator of the current session, creating one if needed."""
    allocator = _allocator_var.get()
    if allocator is None:
        allocator = GensymAllocator()
        _allocator_var.set(allocator)
    return allocator


@contextmanager
def gensym_session(prefix: str = DEFAULT_PREFIX) -> Iterator[GensymAllocator]:
    """Run a compilation session with its own fresh allocator."""
    allocator = GensymAllocator(prefix)
    token = _allocator_var.set(allocator)
    try:
        yield allocator
    finally:
        _allocator_var.reset(token)


def gensym(prefix: Optional[str] = None, location=None) -> Symbol:
    """Generate a unique symbol from the current session's allocator."""
    return current_allocator().gen(prefix, location)
