"""
sprout.compiler.errors - Errors raised while compiling binding forms

All errors are SyntaxError subclasses so the analyzer can report them the
same way it reports reader errors. The span of the offending form, when
known, is kept on `location` and mirrored into the standard SyntaxError
position attributes.
"""

from typing import Optional

from sprout.compiler.location import SourceLocation, get_source_location


class DestructureError(SyntaxError):
    """Base class for binding-form compilation errors."""

    def __init__(self, message: str, form=None):
        super().__init__(message)
        self.location: Optional[SourceLocation] = get_source_location(form)
        if self.location is not None:
            self.lineno = self.location.line
            self.offset = self.location.col
            self.end_lineno = self.location.end_line
            self.end_offset = self.location.end_col


class UnsupportedPatternError(DestructureError):
    """Raised when a binding pattern is not a symbol, vector, map or array."""

    def __init__(self, pattern, message: Optional[str] = None):
        if message is None:
            message = f"Can not destructure {type(pattern).__name__}"
        super().__init__(message, pattern)
        self.pattern = pattern


class MalformedRestError(DestructureError):
    """Raised when & is not followed by exactly one binding pattern."""


class BindingArityError(DestructureError):
    """Raised when a binding vector has an odd number of forms."""
