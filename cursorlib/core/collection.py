"""CursorCollection abstraction for CursorLib.

A CursorCollection is the sole factory of cursors over its own storage.
It declares which traversal strategies it supports, much like an adapter
declares its capabilities, so callers can pick a strategy without knowing
the concrete collection type.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, FrozenSet, Optional

from .._common.config import CursorConfig, TraversalStrategy
from .cursor import Cursor, ModificationGuard


class CursorCollection(ABC):
    """Abstract base class for collections that hand out cursors.

    Subclasses bump ``_version`` on every structural change. Guarded cursors
    compare against it to detect mutation during traversal.
    """

    def __init__(self, config: Optional[CursorConfig] = None):
        """Initialize collection.

        Args:
            config: Default configuration for cursors created by this collection
        """
        self.config = config or CursorConfig()
        self._version = 0

    @abstractmethod
    def size(self) -> int:
        """Return the number of elements (or nodes) currently held."""
        pass

    @abstractmethod
    def cursor_factories(self) -> Dict[TraversalStrategy, Callable[..., Cursor]]:
        """Map each supported strategy to the factory method that creates it.

        Returns:
            Dictionary of strategy -> bound factory method
        """
        pass

    def supported_strategies(self) -> FrozenSet[TraversalStrategy]:
        """Return the traversal strategies this collection can produce."""
        return frozenset(self.cursor_factories())

    def supports(self, strategy: TraversalStrategy) -> bool:
        return strategy in self.cursor_factories()

    def is_empty(self) -> bool:
        return self.size() == 0

    @property
    def version(self) -> int:
        """Structural modification counter."""
        return self._version

    def _touch(self) -> None:
        self._version += 1

    def _make_guard(self, config: Optional[CursorConfig]) -> Optional[ModificationGuard]:
        """Build a guard if the effective config asks for one.

        Args:
            config: Per-cursor override, or None to use the collection default

        Returns:
            ModificationGuard for guarded cursors, None for weak ones
        """
        effective = config or self.config
        if effective.is_guarded:
            return ModificationGuard(lambda: self._version)
        return None

    def __len__(self) -> int:
        return self.size()
