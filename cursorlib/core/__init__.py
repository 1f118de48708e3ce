"""Core abstractions for CursorLib.

This package contains the cursor contract, the collection base class and
the exception hierarchy shared by every collection type.
"""

from .errors import (
    CursorError,
    ExhaustedIterationError,
    InvalidReferenceError,
    ConcurrentModificationError,
    CapabilityMismatchError,
)
from .cursor import Cursor, ModificationGuard, drain, count
from .collection import CursorCollection

__all__ = [
    "CursorError",
    "ExhaustedIterationError",
    "InvalidReferenceError",
    "ConcurrentModificationError",
    "CapabilityMismatchError",
    "Cursor",
    "ModificationGuard",
    "drain",
    "count",
    "CursorCollection",
]
