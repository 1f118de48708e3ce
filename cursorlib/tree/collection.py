"""TreeCollection for CursorLib.

A rooted tree of TreeNode instances with depth-first and breadth-first
cursors.

Example:
    tree = TreeCollection()
    root = tree.insert(None, 1)
    two = tree.insert(root, 2)
    tree.insert(root, 3)
    tree.insert(two, 4)
    tree.insert(two, 5)

    list(tree.create_depth_first_iterator())    # [1, 2, 4, 5, 3]
    list(tree.create_breadth_first_iterator())  # [1, 2, 3, 4, 5]
"""

from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from loguru import logger

from .._common.config import CursorConfig, TraversalStrategy
from ..core.collection import CursorCollection
from ..core.cursor import Cursor
from ..core.errors import InvalidReferenceError
from .cursors import BreadthFirstCursor, DepthFirstCursor
from .node import TreeNode

T = TypeVar("T")


class TreeCollection(CursorCollection, Generic[T]):
    """Rooted tree whose nodes are created by explicit insertion.

    Every node has at most one parent and is never implicitly reparented.
    Removing a node detaches its whole subtree.
    """

    def __init__(self, config: Optional[CursorConfig] = None):
        """Create an empty tree.

        Args:
            config: Default configuration for cursors
        """
        super().__init__(config)
        self._root: Optional[TreeNode[T]] = None
        self._node_count = 0

    @property
    def root(self) -> Optional[TreeNode[T]]:
        return self._root

    # =========================================================================
    # Mutation
    # =========================================================================

    def insert(self, parent: Optional[TreeNode[T]], value: T) -> TreeNode[T]:
        """Create a node holding ``value``.

        Args:
            parent: Node to attach under, or None to create the root
            value: Value stored in the new node

        Returns:
            The new node, usable as ``parent`` for further inserts

        Raises:
            InvalidReferenceError: If ``parent`` is not a node of this tree,
                or ``parent`` is None and the tree already has a root
        """
        if parent is None:
            if self._root is not None:
                raise InvalidReferenceError(
                    "Tree already has a root; pass a parent node to insert under it"
                )
            node = TreeNode(value, owner=self)
            self._root = node
        else:
            self._require_member(parent)
            node = TreeNode(value, owner=self)
            parent._children.append(node)

        self._node_count += 1
        self._touch()
        logger.debug(f"Inserted {value!r} under {parent!r} (nodes={self._node_count})")
        return node

    def remove(self, node: TreeNode[T]) -> int:
        """Detach ``node`` and its whole subtree from the tree.

        Args:
            node: Node to detach; detaching the root empties the tree

        Returns:
            Number of nodes detached

        Raises:
            InvalidReferenceError: If ``node`` is not a node of this tree
        """
        self._require_member(node)

        if node is self._root:
            self._root = None
        else:
            parent = self._find_parent(node)
            parent._children.remove(node)

        # Release ownership across the detached subtree
        detached = 0
        pending: List[TreeNode[T]] = [node]
        while pending:
            current = pending.pop()
            current._owner = None
            pending.extend(current._children)
            detached += 1

        self._node_count -= detached
        self._touch()
        logger.debug(f"Detached subtree at {node!r} ({detached} nodes)")
        return detached

    # =========================================================================
    # Queries
    # =========================================================================

    def size(self) -> int:
        """Return the number of nodes in the tree."""
        return self._node_count

    def contains(self, node: TreeNode) -> bool:
        return isinstance(node, TreeNode) and node.owner is self

    def __iter__(self) -> Iterator[T]:
        return self.create_depth_first_iterator()

    def __repr__(self) -> str:
        return f"TreeCollection(nodes={self._node_count})"

    def _require_member(self, node: TreeNode) -> None:
        if not self.contains(node):
            raise InvalidReferenceError(f"{node!r} does not belong to this tree")

    def _find_parent(self, node: TreeNode[T]) -> TreeNode[T]:
        # No parent pointers; search downwards from the root
        pending: List[TreeNode[T]] = [self._root]
        while pending:
            current = pending.pop()
            for child in current._children:
                if child is node:
                    return current
                pending.append(child)
        raise InvalidReferenceError(f"{node!r} is not reachable from the root")

    # =========================================================================
    # Cursor factories
    # =========================================================================

    def create_depth_first_iterator(self, config: Optional[CursorConfig] = None) -> Cursor[T]:
        """Create a pre-order depth-first cursor."""
        return DepthFirstCursor(self._root, self._make_guard(config))

    def create_breadth_first_iterator(self, config: Optional[CursorConfig] = None) -> Cursor[T]:
        """Create a level-order breadth-first cursor."""
        return BreadthFirstCursor(self._root, self._make_guard(config))

    def cursor_factories(self) -> Dict[TraversalStrategy, Callable[..., Cursor]]:
        return {
            TraversalStrategy.DEPTH_FIRST: self.create_depth_first_iterator,
            TraversalStrategy.BREADTH_FIRST: self.create_breadth_first_iterator,
        }
