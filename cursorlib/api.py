"""High-level API for CursorLib.

This module provides simple, functional interfaces for common traversal
operations. These functions wrap cursor creation and the pull loop for
ease of use in simple cases.
"""

from typing import Any, Callable, Iterator, List, Optional, Union

from ._common.config import CursorConfig, TraversalStrategy
from .core.collection import CursorCollection
from .planning import create_cursor, parse_strategy


def traverse(collection: CursorCollection,
             strategy: Optional[Union[TraversalStrategy, str]] = None,
             predicate: Optional[Callable[[Any], bool]] = None,
             config: Optional[CursorConfig] = None) -> Iterator[Any]:
    """Simple interface for traversal.

    Args:
        collection: Collection to walk
        strategy: Traversal strategy; defaults to the collection's natural
            order (forward for linear collections, depth-first for trees)
        predicate: Predicate for FILTER traversal
        config: Per-cursor override of the collection's config

    Yields:
        Elements in the order the strategy produces them

    Example:
        >>> numbers = LinearCollection([1, 2, 3])
        >>> list(traverse(numbers, "reverse"))
        [3, 2, 1]
    """
    cursor = create_cursor(
        collection,
        _default_strategy(collection) if strategy is None else strategy,
        predicate=predicate,
        config=config,
    )
    while cursor.has_next():
        yield cursor.next()


def collect(collection: CursorCollection,
            strategy: Optional[Union[TraversalStrategy, str]] = None,
            predicate: Optional[Callable[[Any], bool]] = None,
            config: Optional[CursorConfig] = None) -> List[Any]:
    """Traverse eagerly and return the elements as a list."""
    return list(traverse(collection, strategy, predicate, config))


def count_elements(collection: CursorCollection,
                   strategy: Optional[Union[TraversalStrategy, str]] = None,
                   predicate: Optional[Callable[[Any], bool]] = None) -> int:
    """Count the elements a traversal yields.

    Example:
        >>> count_elements(tree, "bfs") == tree.size()
        True
    """
    total = 0
    for _ in traverse(collection, strategy, predicate):
        total += 1
    return total


def find_elements(collection: CursorCollection,
                  predicate: Callable[[Any], bool],
                  strategy: Optional[Union[TraversalStrategy, str]] = None) -> List[Any]:
    """Return every element matching ``predicate``, in traversal order.

    Works for any strategy, including tree traversals which have no
    dedicated filter cursor.

    Args:
        collection: Collection to search
        predicate: Function returning True for wanted elements
        strategy: Traversal order (default: the collection's natural order)

    Returns:
        Matching elements
    """
    return [element for element in traverse(collection, strategy) if predicate(element)]


def _default_strategy(collection: CursorCollection) -> TraversalStrategy:
    # First declared factory is the collection's natural order
    return parse_strategy(next(iter(collection.cursor_factories())))
