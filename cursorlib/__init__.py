"""CursorLib - A catalog of traversal cursors.

CursorLib shows how one pull contract (``has_next()`` / ``next()``) can sit
over different collections and traversal orders without exposing storage.

Collections and their strategies:
━━━━━━━━━━━━━━━━━━━━━━━━━━
LinearCollection:
    create_iterator(), create_reverse_iterator(), create_filter_iterator(p)

TreeCollection:
    create_depth_first_iterator(), create_breadth_first_iterator()
━━━━━━━━━━━━━━━━━━━━━━━━━━

Every cursor can be driven through ``cursorlib.Cursor`` alone, or picked
by name with ``create_cursor(collection, "dfs")``.
"""

__version__ = "0.1.0"

from loguru import logger

# Library logging is silent until the application opts in with logger.enable("cursorlib")
logger.disable("cursorlib")

from .config import TraversalStrategy, MutationPolicy, CursorConfig
from .core import (
    Cursor,
    CursorCollection,
    CursorError,
    ExhaustedIterationError,
    InvalidReferenceError,
    ConcurrentModificationError,
    CapabilityMismatchError,
    drain,
    count,
)
from .linear import LinearCollection, ForwardCursor, ReverseCursor, FilterCursor
from .tree import TreeNode, TreeCollection, DepthFirstCursor, BreadthFirstCursor
from .planning import create_cursor, parse_strategy
from .api import traverse, collect, count_elements, find_elements

__all__ = [
    "__version__",
    # Config
    "TraversalStrategy",
    "MutationPolicy",
    "CursorConfig",
    # Core
    "Cursor",
    "CursorCollection",
    "CursorError",
    "ExhaustedIterationError",
    "InvalidReferenceError",
    "ConcurrentModificationError",
    "CapabilityMismatchError",
    "drain",
    "count",
    # Collections and cursors
    "LinearCollection",
    "ForwardCursor",
    "ReverseCursor",
    "FilterCursor",
    "TreeNode",
    "TreeCollection",
    "DepthFirstCursor",
    "BreadthFirstCursor",
    # Planning and API
    "create_cursor",
    "parse_strategy",
    "traverse",
    "collect",
    "count_elements",
    "find_elements",
]
