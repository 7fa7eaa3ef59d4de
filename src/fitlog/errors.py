"""Error types raised by the fitlog domain model."""


class FitlogError(Exception):
    """Base class for fitlog errors."""

    pass


class InvalidArgumentError(FitlogError, ValueError):
    """Raised when an argument is null, empty, out of range, a duplicate or a no-op update."""

    pass


class IllegalStateError(FitlogError, RuntimeError):
    """Raised when an operation would break an aggregate invariant."""

    pass


class UnsupportedOperationError(IllegalStateError):
    """Raised when removing the last active workout from a routine."""

    pass
