"""Common components shared by the linear and tree collections.

This internal package holds configuration that both collection families
use. It should NOT be imported directly by users.

Important: This package must NEVER import from linear or tree to avoid
circular dependencies.
"""

from .config import (
    TraversalStrategy,
    MutationPolicy,
    CursorConfig,
)

__all__ = [
    'TraversalStrategy',
    'MutationPolicy',
    'CursorConfig',
]
