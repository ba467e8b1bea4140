#!/usr/bin/env python3
"""
Basic AVLTree usage.

This example demonstrates:
- Owning vs. non-owning trees
- Duplicate aggregation and counted traversal
- Early-stopping visitors for conditional aggregation
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from avltreelib import (
    AVLTree,
    TraversalOrder,
    VisitResult,
    collect_values,
    compare_by,
    get_tree_stats,
    natural_compare,
)


class Handle:
    """Stand-in for a resource that must be closed explicitly."""

    def __init__(self, name: str):
        self.name = name
        self.closed = False

    def close(self) -> None:
        self.closed = True
        print(f"  closed {self.name}")


def main():
    print("Plain integers (caller owns payloads):")
    tree = AVLTree(natural_compare)
    for value in (5, 3, 8, 3, 1, 9, 3):
        tree.insert(value)
    print(f"  in-order:  {collect_values(tree)}")
    print(f"  pre-order: {collect_values(tree, order=TraversalOrder.PRE_ORDER)}")
    print(f"  counted:   {collect_values(tree, counted=True)}")
    print(f"  count(3) = {tree.count(3)}")
    print(f"  stats:     {get_tree_stats(tree)}")

    total = 0

    def add_small(value):
        nonlocal total
        if value >= 5:
            return VisitResult.STOP
        total += value
        return VisitResult.CONTINUE

    stopped = tree.traverse(add_small)
    print(f"  sum below 5 = {total} (stopped early: {stopped})")
    tree.destroy()

    print("\nHandles (tree owns payloads):")
    with AVLTree(compare_by(lambda h: h.name), Handle.close) as handles:
        handles.insert(Handle("alpha"))
        handles.insert(Handle("beta"))
        handles.insert(Handle("alpha"))      # duplicate is closed at once
        handles.replace(Handle("beta"))      # old beta is closed
        handles.remove(Handle("alpha"))      # alpha is closed
        print("  leaving with block")


if __name__ == "__main__":
    main()
