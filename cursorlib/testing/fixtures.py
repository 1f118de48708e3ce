"""Test fixtures for CursorLib consumers.

These fixtures let a test suite observe how cursors use predicates and
answer ``has_next()`` without reaching into cursor internals.
"""

from typing import Any, Callable, List


class RecordingPredicate:
    """Predicate wrapper that records every element it is asked about.

    Example:
        evens = RecordingPredicate(lambda n: n % 2 == 0)
        cursor = numbers.create_filter_iterator(evens)
        drain(cursor)
        assert evens.calls == numbers.to_list()   # each candidate once, in order
    """

    def __init__(self, predicate: Callable[[Any], bool]):
        self._predicate = predicate
        self.calls: List[Any] = []

    def __call__(self, element: Any) -> bool:
        self.calls.append(element)
        return bool(self._predicate(element))

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def was_called_once_per(self, elements: List[Any]) -> bool:
        """Check that the predicate saw exactly ``elements``, in that order."""
        return self.calls == list(elements)


class CursorProbe:
    """Public test fixture for cursor contract checks.

    Wraps any Cursor and offers assertions that hold for every strategy,
    so the same checks can run against forward, reverse, filter,
    depth-first and breadth-first cursors alike.
    """

    def __init__(self, cursor, repeats: int = 3):
        """Initialize with a cursor.

        Args:
            cursor: Cursor under test
            repeats: How many times to ask has_next() before each pull
        """
        self._cursor = cursor
        self._repeats = repeats

    def drain_checking_idempotence(self) -> List[Any]:
        """Exhaust the cursor, asking has_next() several times per step.

        Returns:
            Elements pulled, in order

        Raises:
            AssertionError: If repeated has_next() calls ever disagree
        """
        pulled: List[Any] = []
        while True:
            answers = {self._cursor.has_next() for _ in range(self._repeats)}
            if len(answers) != 1:
                raise AssertionError(f"has_next() not idempotent: {answers}")
            if not answers.pop():
                return pulled
            pulled.append(self._cursor.next())
