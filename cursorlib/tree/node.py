"""TreeNode for CursorLib.

The TreeNode is intentionally kept simple: a value plus an ordered list of
children. Nodes are only created through TreeCollection.insert(), which is
what keeps every node under exactly one parent.
"""

from typing import Any, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class TreeNode(Generic[T]):
    """A node in a TreeCollection.

    A node exclusively owns its children. It keeps no parent pointer;
    traversal only ever walks downwards. ``owner`` records which tree the
    node currently belongs to and is cleared when its subtree is detached.
    """

    __slots__ = ("value", "_children", "_owner")

    def __init__(self, value: T, owner: Optional[Any] = None):
        self.value = value
        self._children: List["TreeNode[T]"] = []
        self._owner = owner

    @property
    def children(self) -> Tuple["TreeNode[T]", ...]:
        """Children in insertion order (read-only snapshot)."""
        return tuple(self._children)

    @property
    def owner(self) -> Optional[Any]:
        return self._owner

    def is_leaf(self) -> bool:
        return not self._children

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"TreeNode(value={self.value!r}, children={len(self._children)})"
