#!/usr/bin/env python3
"""
Basic cursor example showing every traversal strategy in CursorLib.

This example demonstrates:
- Forward, reverse and filtered traversal of a linear collection
- Depth-first and breadth-first traversal of a tree
- Picking a strategy by name with create_cursor()
- Enabling the library's debug logging
"""

import sys
from pathlib import Path

from loguru import logger

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from cursorlib import LinearCollection, TreeCollection, create_cursor


def show(title, cursor):
    """Pull every element out of a cursor and print them on one line."""
    values = []
    while cursor.has_next():
        values.append(str(cursor.next()))
    print(f"{title:<22} {' -> '.join(values)}")


def main():
    """Walk a list and a tree with every strategy."""
    if "--debug" in sys.argv:
        logger.enable("cursorlib")

    numbers = LinearCollection()
    for n in range(1, 6):
        numbers.append(n)

    print("Linear collection")
    print("-" * 50)
    show("Forward:", numbers.create_iterator())
    show("Reverse:", numbers.create_reverse_iterator())
    show("Filtered (even):", numbers.create_filter_iterator(lambda n: n % 2 == 0))

    numbers.for_each(lambda item, index: print(f"  [{index}] = {item}"))

    tree = TreeCollection()
    a = tree.insert(None, "A")
    b = tree.insert(a, "B")
    c = tree.insert(a, "C")
    tree.insert(b, "D")
    tree.insert(b, "E")
    tree.insert(c, "F")

    print("\nTree collection")
    print("-" * 50)
    show("Depth-first:", tree.create_depth_first_iterator())
    show("Breadth-first:", tree.create_breadth_first_iterator())

    print("\nBy strategy name")
    print("-" * 50)
    for name in ("dfs", "bfs"):
        show(f"{name}:", create_cursor(tree, name))


if __name__ == "__main__":
    main()
