"""Test fixtures for AVLTreeLib consumers.

These fixtures provide controlled access to internal state for testing
purposes without exposing implementation details as part of the public API.
"""

from typing import Any, List, Optional, Tuple

from ..core.node import TreeNode
from ..core.balance import MAX_IMBALANCE, height
from ..tree import AVLTree


def check_invariants(tree: AVLTree) -> List[str]:
    """Verify the structural invariants of a tree.

    Checks, for every node:
    - AVL balance: |height(left) - height(right)| <= 1
    - Cached height equals the recomputed height
    - Left keys compare less and right keys compare greater
    - Duplicate count is at least 1

    Example:
        tree = create_tree()
        tree.insert(1)
        assert check_invariants(tree) == []

    Returns:
        List of violations (empty if the tree is valid)
    """
    errors: List[str] = []
    compare = tree.ops.compare

    def walk(node: Optional[TreeNode], low: Any, high: Any, bounded_low: bool,
             bounded_high: bool) -> int:
        if node is None:
            return -1

        left_height = walk(node.left, low, node.payload, bounded_low, True)
        right_height = walk(node.right, node.payload, high, True, bounded_high)
        expected = max(left_height, right_height) + 1

        if node.height != expected:
            errors.append(f"{node!r}: cached height {node.height}, expected {expected}")
        if abs(left_height - right_height) > MAX_IMBALANCE:
            errors.append(f"{node!r}: imbalance {left_height - right_height}")
        if node.count < 1:
            errors.append(f"{node!r}: count must be at least 1")
        if bounded_low and compare(node.payload, low) <= 0:
            errors.append(f"{node!r}: not greater than ancestor {low!r}")
        if bounded_high and compare(node.payload, high) >= 0:
            errors.append(f"{node!r}: not less than ancestor {high!r}")

        return expected

    walk(tree._root, None, None, False, False)
    return errors


def assert_invariants(tree: AVLTree) -> None:
    """Raise AssertionError listing every invariant violation."""
    errors = check_invariants(tree)
    assert not errors, "AVL invariants violated:\n  " + "\n  ".join(errors)


def snapshot(tree: AVLTree) -> Optional[Tuple]:
    """Return the tree's shape as nested (payload, left, right) tuples.

    Absent subtrees are None, so a single node is ``(x, None, None)``.
    Useful for asserting the exact result of a rotation.
    """
    def shape(node: Optional[TreeNode]) -> Optional[Tuple]:
        if node is None:
            return None
        return (node.payload, shape(node.left), shape(node.right))

    return shape(tree._root)


def node_heights(tree: AVLTree) -> List[Tuple[Any, int]]:
    """In-order list of (payload, cached height) pairs."""
    result: List[Tuple[Any, int]] = []

    def walk(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        walk(node.left)
        result.append((node.payload, height(node)))
        walk(node.right)

    walk(tree._root)
    return result
