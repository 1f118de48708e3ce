"""Exception hierarchy for CursorLib."""


class CursorError(Exception):
    """Base class for every error raised by CursorLib."""
    pass


class ExhaustedIterationError(CursorError):
    """Raised by Cursor.next() when no element remains."""

    def __init__(self, message: str = "No more elements"):
        super().__init__(message)


class InvalidReferenceError(CursorError):
    """Raised when a node reference does not belong to the tree it is used with."""
    pass


class ConcurrentModificationError(CursorError):
    """Raised by a guarded cursor whose collection changed after it was created."""
    pass


class CapabilityMismatchError(CursorError):
    """Raised when a collection can't satisfy the requested traversal."""
    pass
