"""Configuration system for CursorLib.

This module defines how users pick a traversal strategy and how cursors
behave when their source collection changes underneath them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class TraversalStrategy(Enum):
    """How to walk a collection.

    Linear collections support FORWARD, REVERSE and FILTER. Tree
    collections support DEPTH_FIRST and BREADTH_FIRST.
    """
    FORWARD = "forward"        # Insertion order
    REVERSE = "reverse"        # Last appended first
    FILTER = "filter"          # Forward, predicate-matching only
    DEPTH_FIRST = "dfs"        # Pre-order, parent before children
    BREADTH_FIRST = "bfs"      # Level by level


class MutationPolicy(Enum):
    """What a live cursor does when its collection is mutated.

    WEAK cursors read the live structure and never fail because of a
    mutation; the elements they yield afterwards are unspecified but
    bounded. GUARDED cursors fail fast with ConcurrentModificationError.
    """
    WEAK = "weak"
    GUARDED = "guarded"


@dataclass
class CursorConfig:
    """Configuration shared by a collection and the cursors it creates."""

    mutation_policy: MutationPolicy = MutationPolicy.WEAK

    @classmethod
    def weak(cls) -> 'CursorConfig':
        """Create config for cursors that tolerate concurrent mutation."""
        return cls(mutation_policy=MutationPolicy.WEAK)

    @classmethod
    def guarded(cls) -> 'CursorConfig':
        """Create config for cursors that fail fast on concurrent mutation."""
        return cls(mutation_policy=MutationPolicy.GUARDED)

    @property
    def is_guarded(self) -> bool:
        return self.mutation_policy == MutationPolicy.GUARDED

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.mutation_policy, MutationPolicy):
            errors.append(
                f"mutation_policy must be a MutationPolicy, got {self.mutation_policy!r}"
            )

        return errors
