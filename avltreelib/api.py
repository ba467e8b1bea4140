"""High-level API for AVLTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the visitor-based AVLTree API for ease
of use in simple cases.
"""

import math
from typing import Any, Callable, Dict, List, Optional, Union

from .config import (
    Comparator,
    Destructor,
    TraversalOrder,
    VisitResult,
    natural_compare,
)
from .tree import AVLTree


def create_tree(compare: Comparator = natural_compare,
                destroy: Optional[Destructor] = None) -> AVLTree:
    """Create an empty tree.

    Args:
        compare: Three-way comparator, natural ordering by default
        destroy: Optional payload destructor (tree owns payloads)

    Returns:
        Empty AVLTree

    Example:
        >>> tree = create_tree()
        >>> tree.insert(42)
    """
    return AVLTree(compare, destroy)


def collect_values(tree: AVLTree,
                   order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
                   counted: bool = False) -> List[Any]:
    """Collect the stored payloads into a list.

    Args:
        tree: Tree to traverse
        order: Traversal order
        counted: Repeat each payload once per aggregated insertion

    Returns:
        List of payloads in traversal order

    Example:
        >>> tree = create_tree()
        >>> for v in (2, 1, 2):
        ...     tree.insert(v)
        >>> collect_values(tree, counted=True)
        [1, 2, 2]
    """
    values: List[Any] = []
    tree.traverse(values.append, order=order, counted=counted)
    return values


def sum_until(tree: AVLTree,
              limit: Any,
              value: Callable[[Any], Any] = lambda payload: payload,
              counted: bool = False) -> Any:
    """Sum payload values in sorted order while they stay below a limit.

    The traversal stops at the first value that is not below ``limit``.

    Args:
        tree: Tree to traverse
        limit: Exclusive upper bound on summed values
        value: Extracts the numeric value from a payload
        counted: Include every aggregated duplicate

    Returns:
        Sum of the visited values
    """
    total = 0

    def add(payload: Any) -> VisitResult:
        nonlocal total
        v = value(payload)
        if v < limit:
            total += v
            return VisitResult.CONTINUE
        return VisitResult.STOP

    tree.traverse(add, counted=counted)
    return total


def find_first(tree: AVLTree,
               predicate: Callable[[Any], bool],
               order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> Any:
    """Return the first payload satisfying predicate, or None.

    Example:
        >>> tree = create_tree()
        >>> for v in (5, 8, 13):
        ...     tree.insert(v)
        >>> find_first(tree, lambda v: v % 2 == 0)
        8
    """
    found = []

    def check(payload: Any) -> VisitResult:
        if predicate(payload):
            found.append(payload)
            return VisitResult.STOP
        return VisitResult.CONTINUE

    tree.traverse(check, order=order)
    return found[0] if found else None


def height_bound(size: int) -> int:
    """Upper bound on the height of an AVL tree holding size nodes."""
    return math.ceil(1.44 * math.log2(size + 2))


def get_tree_stats(tree: AVLTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Distinct keys: {stats['size']}")
    """
    total = 0

    def tally(payload: Any) -> None:
        nonlocal total
        total += 1

    tree.traverse_counted(tally)
    size = tree.size()

    return {
        'size': size,
        'total_count': total,
        'height': tree.height(),
        'height_bound': height_bound(size),
        'is_empty': size == 0,
    }
