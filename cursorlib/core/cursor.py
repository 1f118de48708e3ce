"""Cursor abstraction for CursorLib.

A Cursor is a single-pass, pull-based view over a collection. Clients call
``has_next()`` and ``next()`` until the cursor is exhausted and never touch
the collection's storage directly. Cursors are not restartable: request a
new one from the collection to traverse again.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, TypeVar

from .errors import ConcurrentModificationError, ExhaustedIterationError

T = TypeVar("T")


class ModificationGuard:
    """Detects structural changes to a collection since a cursor was created.

    The guard records the collection's version when the cursor is built.
    Collections bump their version on every structural change, so any
    difference means the cursor's view is stale.
    """

    def __init__(self, version_source: Callable[[], int]):
        """Initialize guard against a version counter.

        Args:
            version_source: Callable returning the collection's current version
        """
        self._version_source = version_source
        self._expected = version_source()

    def check(self) -> None:
        """Raise ConcurrentModificationError if the collection changed.

        Raises:
            ConcurrentModificationError: If the version moved since creation
        """
        current = self._version_source()
        if current != self._expected:
            raise ConcurrentModificationError(
                f"Collection modified during traversal "
                f"(version {self._expected} -> {current})"
            )


class Cursor(ABC, Generic[T]):
    """Abstract base class for all traversal cursors.

    Subclasses hold a traversal position (an index, a stack or a queue) and
    a read reference to the collection's storage. They never own or copy
    that storage.

    Every cursor is also a Python iterator, so ``for item in cursor`` and
    ``list(cursor)`` work. Exhaustion surfaces as StopIteration through that
    protocol and as ExhaustedIterationError through ``next()``.
    """

    def __init__(self, guard: Optional[ModificationGuard] = None):
        """Initialize cursor.

        Args:
            guard: Optional guard making this cursor fail fast on mutation
        """
        self._guard = guard

    @abstractmethod
    def has_next(self) -> bool:
        """Check whether another call to next() would succeed.

        Calling this repeatedly without an intervening next() always
        returns the same answer and never changes what next() returns.

        Returns:
            True if an element remains
        """
        pass

    @abstractmethod
    def next(self) -> T:
        """Advance by exactly one element and return it.

        Returns:
            The next element

        Raises:
            ExhaustedIterationError: If no element remains
            ConcurrentModificationError: If guarded and the source changed
        """
        pass

    @property
    def is_guarded(self) -> bool:
        return self._guard is not None

    def _check_guard(self) -> None:
        if self._guard is not None:
            self._guard.check()

    def _exhausted(self) -> ExhaustedIterationError:
        return ExhaustedIterationError(
            f"No more elements in {self.__class__.__name__}"
        )

    def __iter__(self) -> "Cursor[T]":
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(guarded={self.is_guarded})"


def drain(cursor: Cursor[T]) -> List[T]:
    """Pull every remaining element out of a cursor.

    Args:
        cursor: Cursor to exhaust

    Returns:
        Remaining elements in cursor order
    """
    result: List[T] = []
    while cursor.has_next():
        result.append(cursor.next())
    return result


def count(cursor: Cursor) -> int:
    """Count the remaining elements of a cursor, exhausting it."""
    total = 0
    while cursor.has_next():
        cursor.next()
        total += 1
    return total
