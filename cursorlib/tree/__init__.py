"""Tree collection and its depth-first and breadth-first cursors."""

from .node import TreeNode
from .collection import TreeCollection
from .cursors import DepthFirstCursor, BreadthFirstCursor

__all__ = [
    'TreeNode',
    'TreeCollection',
    'DepthFirstCursor',
    'BreadthFirstCursor',
]
