"""Tree traversal cursors for CursorLib.

Both cursors keep their pending nodes in an explicit structure private to
the cursor instance: a stack for depth-first, a queue for breadth-first.
A node's children are read when the node itself is handed out, not when
the cursor is created.
"""

from collections import deque
from typing import Deque, List, Optional, TypeVar

from ..core.cursor import Cursor, ModificationGuard
from .node import TreeNode

T = TypeVar("T")


class DepthFirstCursor(Cursor[T]):
    """Depth-first pre-order traversal.

    Visits a node, then each of its subtrees left to right before any
    sibling. Children are pushed in reverse so the leftmost is popped next.
    """

    def __init__(self, root: Optional[TreeNode[T]], guard: Optional[ModificationGuard] = None):
        super().__init__(guard)
        self._stack: List[TreeNode[T]] = [root] if root is not None else []

    def has_next(self) -> bool:
        return len(self._stack) > 0

    def next(self) -> T:
        self._check_guard()
        if not self._stack:
            raise self._exhausted()

        node = self._stack.pop()
        self._stack.extend(reversed(node.children))
        return node.value


class BreadthFirstCursor(Cursor[T]):
    """Breadth-first (level-order) traversal.

    Visits every node at depth N, left to right, before any node at
    depth N+1.
    """

    def __init__(self, root: Optional[TreeNode[T]], guard: Optional[ModificationGuard] = None):
        super().__init__(guard)
        self._queue: Deque[TreeNode[T]] = deque([root]) if root is not None else deque()

    def has_next(self) -> bool:
        return len(self._queue) > 0

    def next(self) -> T:
        self._check_guard()
        if not self._queue:
            raise self._exhausted()

        node = self._queue.popleft()
        self._queue.extend(node.children)
        return node.value
