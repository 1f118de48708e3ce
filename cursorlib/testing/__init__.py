"""Testing utilities for CursorLib consumers."""

from .fixtures import CursorProbe, RecordingPredicate

__all__ = ['CursorProbe', 'RecordingPredicate']
