"""Cursors over a linear collection.

All three cursors read the collection's backing list by reference. Under
the default weak mutation policy they keep working when the list changes
mid-traversal: they may see a different element set than the list held at
creation, but they never index outside the list and only ever fail with
ExhaustedIterationError.
"""

from typing import Callable, List, Optional, TypeVar

from ..core.cursor import Cursor, ModificationGuard

T = TypeVar("T")


class ForwardCursor(Cursor[T]):
    """Insertion-order traversal.

    The position starts at 0 and is compared against the live list length,
    so elements appended after creation are yielded too.
    """

    def __init__(self, items: List[T], guard: Optional[ModificationGuard] = None):
        super().__init__(guard)
        self._items = items
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._items)

    def next(self) -> T:
        self._check_guard()
        if not self.has_next():
            raise self._exhausted()
        item = self._items[self._position]
        self._position += 1
        return item


class ReverseCursor(Cursor[T]):
    """Last-to-first traversal.

    The start position is fixed at ``size - 1`` when the cursor is created,
    so later appends are not seen. If elements are removed the position is
    clamped to the current last index.
    """

    def __init__(self, items: List[T], guard: Optional[ModificationGuard] = None):
        super().__init__(guard)
        self._items = items
        self._position = len(items) - 1

    def _effective_position(self) -> int:
        # Shrinks with the list, never grows past the creation-time start
        return min(self._position, len(self._items) - 1)

    def has_next(self) -> bool:
        return self._effective_position() >= 0

    def next(self) -> T:
        self._check_guard()
        position = self._effective_position()
        if position < 0:
            raise self._exhausted()
        item = self._items[position]
        self._position = position - 1
        return item


class FilterCursor(Cursor[T]):
    """Forward traversal restricted to elements matching a predicate.

    Whether a matching element remains can't be known without scanning, so
    ``has_next()`` prefetches the next match into a pending slot that
    ``next()`` then hands out. The predicate runs exactly once per candidate,
    in encounter order. Once the source runs dry the cursor stays exhausted
    even if the collection grows afterwards.
    """

    def __init__(self,
                 source: Cursor[T],
                 predicate: Callable[[T], bool],
                 guard: Optional[ModificationGuard] = None):
        """Initialize filter cursor.

        Args:
            source: Cursor supplying candidates (normally a ForwardCursor)
            predicate: Called once per candidate; truthy keeps it
            guard: Optional guard making this cursor fail fast on mutation
        """
        super().__init__(guard)
        self._source = source
        self._predicate = predicate
        self._pending: Optional[T] = None
        self._has_pending = False
        self._finished = False

    def has_next(self) -> bool:
        if self._has_pending:
            return True
        if self._finished:
            return False

        while self._source.has_next():
            candidate = self._source.next()
            if self._predicate(candidate):
                self._pending = candidate
                self._has_pending = True
                return True

        self._finished = True
        return False

    def next(self) -> T:
        self._check_guard()
        if not self.has_next():
            raise self._exhausted()
        item = self._pending
        self._pending = None
        self._has_pending = False
        return item
