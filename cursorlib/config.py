"""Configuration re-export.

Public home of the configuration components defined in the _common package.
"""

from ._common.config import (
    TraversalStrategy,
    MutationPolicy,
    CursorConfig,
)

__all__ = [
    'TraversalStrategy',
    'MutationPolicy',
    'CursorConfig',
]
