"""LinearCollection for CursorLib.

An insertion-ordered sequence that hides its storage behind cursors. Code
that wants the elements asks for a cursor (forward, reverse or filtered)
instead of reaching for an index or the backing list.

Example:
    numbers = LinearCollection()
    for n in range(1, 6):
        numbers.append(n)

    evens = numbers.create_filter_iterator(lambda n: n % 2 == 0)
    while evens.has_next():
        print(evens.next())   # 2, then 4
"""

from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, TypeVar

from loguru import logger

from .._common.config import CursorConfig, TraversalStrategy
from ..core.collection import CursorCollection
from ..core.cursor import Cursor
from .cursors import FilterCursor, ForwardCursor, ReverseCursor

T = TypeVar("T")


class LinearCollection(CursorCollection, Generic[T]):
    """Insertion-ordered, mutable sequence of elements.

    The collection owns its backing list exclusively. Cursors hold a read
    reference to that list, never a copy, so how they behave when the
    collection is mutated mid-traversal depends on the mutation policy
    (see MutationPolicy).
    """

    def __init__(self,
                 items: Optional[Iterable[T]] = None,
                 config: Optional[CursorConfig] = None):
        """Create a linear collection.

        Args:
            items: Optional initial elements, appended in order
            config: Default configuration for cursors
        """
        super().__init__(config)
        self._items: List[T] = []
        if items is not None:
            for item in items:
                self.append(item)

    # =========================================================================
    # Mutation
    # =========================================================================

    def append(self, element: T) -> None:
        """Add an element at the end of the sequence."""
        self._items.append(element)
        self._touch()
        logger.debug(f"Appended {element!r} (size={len(self._items)})")

    def remove(self, element: T) -> bool:
        """Remove the first element equal to ``element``.

        Args:
            element: Value to remove

        Returns:
            True if an element was removed, False if none matched
        """
        try:
            self._items.remove(element)
        except ValueError:
            return False
        self._touch()
        logger.debug(f"Removed {element!r} (size={len(self._items)})")
        return True

    # =========================================================================
    # Queries
    # =========================================================================

    def size(self) -> int:
        return len(self._items)

    def for_each(self, callback: Callable[[T, int], Any]) -> None:
        """Call ``callback(element, index)`` for every element in order."""
        cursor = self.create_iterator()
        index = 0
        while cursor.has_next():
            callback(cursor.next(), index)
            index += 1

    def to_list(self) -> List[T]:
        """Return a new list of the elements; changing it leaves the collection alone."""
        return list(self._items)

    def __iter__(self) -> Iterator[T]:
        return self.create_iterator()

    def __repr__(self) -> str:
        return f"LinearCollection(size={self.size()})"

    # =========================================================================
    # Cursor factories
    # =========================================================================

    def create_iterator(self, config: Optional[CursorConfig] = None) -> Cursor[T]:
        """Create a cursor yielding elements in insertion order."""
        return ForwardCursor(self._items, self._make_guard(config))

    def create_reverse_iterator(self, config: Optional[CursorConfig] = None) -> Cursor[T]:
        """Create a cursor yielding elements from last to first."""
        return ReverseCursor(self._items, self._make_guard(config))

    def create_filter_iterator(self,
                               predicate: Callable[[T], bool],
                               config: Optional[CursorConfig] = None) -> Cursor[T]:
        """Create a cursor yielding, in order, only elements matching ``predicate``.

        Args:
            predicate: Called once per candidate element
            config: Per-cursor override of the collection's config
        """
        guard = self._make_guard(config)
        return FilterCursor(ForwardCursor(self._items, guard), predicate, guard)

    def cursor_factories(self) -> Dict[TraversalStrategy, Callable[..., Cursor]]:
        return {
            TraversalStrategy.FORWARD: self.create_iterator,
            TraversalStrategy.REVERSE: self.create_reverse_iterator,
            TraversalStrategy.FILTER: self.create_filter_iterator,
        }
