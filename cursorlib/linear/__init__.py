"""Linear collection and its forward, reverse and filter cursors."""

from .collection import LinearCollection
from .cursors import ForwardCursor, ReverseCursor, FilterCursor

__all__ = [
    'LinearCollection',
    'ForwardCursor',
    'ReverseCursor',
    'FilterCursor',
]
