"""Unit tests for LinearCollection and its cursors.

Covers ordering, filter lookahead, predicate call discipline, cursor
independence and the collection's own mutation/query methods.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cursorlib import (
    LinearCollection,
    ForwardCursor,
    ReverseCursor,
    FilterCursor,
    ExhaustedIterationError,
    drain,
    count,
)
from cursorlib.testing import RecordingPredicate, CursorProbe


class TestForwardCursor(unittest.TestCase):
    """Test insertion-order traversal."""

    def test_iterates_all_elements(self):
        """Test cursor yields every element in order."""
        cursor = ForwardCursor(["A", "B", "C"])
        self.assertEqual(drain(cursor), ["A", "B", "C"])

    def test_raises_when_exhausted(self):
        """Test next() after exhaustion raises ExhaustedIterationError."""
        cursor = ForwardCursor(["A"])
        cursor.next()
        self.assertFalse(cursor.has_next())
        with self.assertRaises(ExhaustedIterationError):
            cursor.next()
        # Still exhausted on a second attempt
        with self.assertRaises(ExhaustedIterationError):
            cursor.next()

    def test_empty_source(self):
        """Test cursor over an empty list."""
        cursor = ForwardCursor([])
        self.assertFalse(cursor.has_next())
        with self.assertRaises(ExhaustedIterationError):
            cursor.next()

    def test_has_next_is_idempotent(self):
        """Test repeated has_next() never moves the cursor."""
        cursor = ForwardCursor([1, 2])
        for _ in range(5):
            self.assertTrue(cursor.has_next())
        self.assertEqual(cursor.next(), 1)


class TestReverseCursor(unittest.TestCase):
    """Test last-to-first traversal."""

    def test_iterates_in_reverse(self):
        cursor = ReverseCursor(["A", "B", "C"])
        self.assertEqual(drain(cursor), ["C", "B", "A"])

    def test_single_element(self):
        cursor = ReverseCursor(["only"])
        self.assertEqual(cursor.next(), "only")
        self.assertFalse(cursor.has_next())

    def test_empty_source(self):
        cursor = ReverseCursor([])
        self.assertFalse(cursor.has_next())
        with self.assertRaises(ExhaustedIterationError):
            cursor.next()


class TestFilterCursor(unittest.TestCase):
    """Test predicate-filtered traversal."""

    def test_only_matching_elements(self):
        """Test filter keeps order and drops non-matches."""
        cursor = FilterCursor(ForwardCursor([1, 2, 3, 4, 5, 6]), lambda n: n % 2 == 0)
        self.assertEqual(drain(cursor), [2, 4, 6])

    def test_filter_matching_nothing(self):
        """Test filter that matches nothing is exhausted immediately."""
        cursor = FilterCursor(ForwardCursor([1, 3, 5]), lambda n: n % 2 == 0)
        self.assertFalse(cursor.has_next())
        with self.assertRaises(ExhaustedIterationError):
            cursor.next()

    def test_predicate_called_once_per_candidate(self):
        """Test predicate runs exactly once per element, in encounter order."""
        numbers = LinearCollection([1, 2, 3, 4, 5])
        evens = RecordingPredicate(lambda n: n % 2 == 0)
        cursor = numbers.create_filter_iterator(evens)

        # Hammer has_next() between pulls; it must not re-run the predicate
        CursorProbe(cursor, repeats=4).drain_checking_idempotence()

        self.assertTrue(evens.was_called_once_per([1, 2, 3, 4, 5]))
        self.assertEqual(evens.call_count, 5)

    def test_lookahead_is_lazy(self):
        """Test the filter scans only as far as the next match."""
        numbers = LinearCollection([1, 2, 3, 4, 5])
        evens = RecordingPredicate(lambda n: n % 2 == 0)
        cursor = numbers.create_filter_iterator(evens)

        self.assertEqual(evens.call_count, 0)
        self.assertTrue(cursor.has_next())
        self.assertEqual(evens.calls, [1, 2])
        self.assertEqual(cursor.next(), 2)
        self.assertEqual(evens.calls, [1, 2])

    def test_next_without_has_next(self):
        """Test next() prefetches on its own when has_next() was skipped."""
        cursor = FilterCursor(ForwardCursor([1, 2, 3, 4]), lambda n: n > 2)
        self.assertEqual(cursor.next(), 3)
        self.assertEqual(cursor.next(), 4)
        with self.assertRaises(ExhaustedIterationError):
            cursor.next()

    def test_matches_eager_filter(self):
        """Test filter output equals an eager list comprehension."""
        data = [5, -3, 8, 0, 12, -7, 8, 1]
        numbers = LinearCollection(data)
        predicates = [
            lambda n: n > 0,
            lambda n: n % 2 == 0,
            lambda n: False,
            lambda n: True,
        ]
        for predicate in predicates:
            expected = [e for e in drain(numbers.create_iterator()) if predicate(e)]
            self.assertEqual(drain(numbers.create_filter_iterator(predicate)), expected)


class TestLinearCollection(unittest.TestCase):
    """Test collection mutation, queries and factories."""

    def setUp(self):
        self.collection = LinearCollection()
        for n in (1, 2, 3):
            self.collection.append(n)

    def test_factories_produce_expected_orders(self):
        self.assertEqual(drain(self.collection.create_iterator()), [1, 2, 3])
        self.assertEqual(drain(self.collection.create_reverse_iterator()), [3, 2, 1])
        self.assertEqual(drain(self.collection.create_filter_iterator(lambda n: n > 1)), [2, 3])

    def test_append_and_remove(self):
        self.assertEqual(self.collection.size(), 3)

        self.collection.append(4)
        self.assertEqual(self.collection.size(), 4)

        self.assertTrue(self.collection.remove(2))
        self.assertEqual(self.collection.size(), 3)

        self.assertFalse(self.collection.remove(99))
        self.assertEqual(self.collection.size(), 3)
        self.assertEqual(self.collection.to_list(), [1, 3, 4])

    def test_remove_first_occurrence_only(self):
        collection = LinearCollection(["a", "b", "a"])
        self.assertTrue(collection.remove("a"))
        self.assertEqual(collection.to_list(), ["b", "a"])

    def test_is_empty(self):
        self.assertFalse(self.collection.is_empty())
        self.assertTrue(LinearCollection().is_empty())
        self.assertEqual(len(LinearCollection()), 0)

    def test_for_each_passes_index(self):
        results = []
        self.collection.for_each(lambda item, index: results.append((item, index)))
        self.assertEqual(results, [(1, 0), (2, 1), (3, 2)])

    def test_to_list_returns_copy(self):
        array = self.collection.to_list()
        array.append(4)
        self.assertEqual(self.collection.size(), 3)

    def test_initial_items(self):
        collection = LinearCollection("xyz")
        self.assertEqual(drain(collection.create_iterator()), ["x", "y", "z"])

    def test_counts_match_size(self):
        collection = LinearCollection(range(17))
        self.assertEqual(count(collection.create_iterator()), 17)
        self.assertEqual(count(collection.create_reverse_iterator()), 17)

    def test_cursors_are_independent(self):
        """Test advancing one cursor does not advance another."""
        first = self.collection.create_iterator()
        second = self.collection.create_iterator()

        self.assertEqual(first.next(), 1)
        self.assertEqual(first.next(), 2)

        self.assertEqual(drain(second), [1, 2, 3])
        self.assertEqual(drain(first), [3])

    def test_mixed_strategy_cursors_are_independent(self):
        forward = self.collection.create_iterator()
        backward = self.collection.create_reverse_iterator()

        self.assertEqual(forward.next(), 1)
        self.assertEqual(backward.next(), 3)
        self.assertEqual(forward.next(), 2)
        self.assertEqual(backward.next(), 2)


if __name__ == "__main__":
    unittest.main()
