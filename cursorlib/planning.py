"""Cursor planning for CursorLib.

Validates that a collection can satisfy a requested traversal strategy
before any cursor is created, then dispatches to the collection's own
factory method for that strategy.
"""

from typing import Callable, Optional, Union

from loguru import logger

from ._common.config import CursorConfig, TraversalStrategy
from .core.collection import CursorCollection
from .core.cursor import Cursor
from .core.errors import CapabilityMismatchError


_STRATEGY_ALIASES = {
    'forward': TraversalStrategy.FORWARD,
    'reverse': TraversalStrategy.REVERSE,
    'filter': TraversalStrategy.FILTER,
    'filtered': TraversalStrategy.FILTER,
    'dfs': TraversalStrategy.DEPTH_FIRST,
    'depth_first': TraversalStrategy.DEPTH_FIRST,
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Convert a strategy name to a TraversalStrategy.

    Args:
        strategy: TraversalStrategy member or a name such as "dfs" or "reverse"

    Returns:
        TraversalStrategy member

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = str(strategy).lower()
    if strategy_lower not in _STRATEGY_ALIASES:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
        )
    return _STRATEGY_ALIASES[strategy_lower]


def create_cursor(collection: CursorCollection,
                  strategy: Union[TraversalStrategy, str],
                  predicate: Optional[Callable[[object], bool]] = None,
                  config: Optional[CursorConfig] = None) -> Cursor:
    """Create a cursor over ``collection`` for the named strategy.

    Args:
        collection: Linear or tree collection
        strategy: Which traversal to perform
        predicate: Required for FILTER, ignored otherwise
        config: Per-cursor override of the collection's config

    Returns:
        Cursor produced by the collection's factory for that strategy

    Raises:
        CapabilityMismatchError: If the collection can't produce that
            strategy, a FILTER cursor has no predicate, or config is invalid
        ValueError: If the strategy name is not recognized
    """
    resolved = parse_strategy(strategy)

    if config is not None:
        config_errors = config.validate()
        if config_errors:
            raise CapabilityMismatchError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

    factories = collection.cursor_factories()
    if resolved not in factories:
        supported = ', '.join(sorted(s.value for s in factories))
        raise CapabilityMismatchError(
            f"{collection.__class__.__name__} does not support {resolved.value} "
            f"traversal (supports: {supported})"
        )

    factory = factories[resolved]
    if resolved == TraversalStrategy.FILTER:
        if predicate is None:
            raise CapabilityMismatchError("Filter traversal requires a predicate")
        cursor = factory(predicate, config=config)
    else:
        cursor = factory(config=config)

    logger.debug(f"Created {cursor!r} over {collection!r} for {resolved.value}")
    return cursor
