"""Unit tests for the balancing engine.

Builds small node graphs by hand and checks that every rotation case
produces the expected shape and refreshes the cached heights.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from avltreelib.core.node import TreeNode
from avltreelib.core.balance import (
    balance_factor,
    double_with_left,
    double_with_right,
    height,
    rebalance,
    rotate_with_left,
    rotate_with_right,
    update_height,
)


def link(payload, left=None, right=None) -> TreeNode:
    """Build a node with children and a correct cached height."""
    node = TreeNode(payload)
    node.left = left
    node.right = right
    update_height(node)
    return node


def shape(node):
    if node is None:
        return None
    return (node.payload, shape(node.left), shape(node.right))


def test_height_of_absent_subtree():
    assert height(None) == -1
    assert balance_factor(None) == 0


def test_new_node_is_single_node_tree():
    node = TreeNode("x")
    assert node.count == 1
    assert node.height == 0
    assert node.left is None and node.right is None


def test_rotate_with_left_promotes_left_child():
    root = link(3, left=link(2, left=link(1)))
    new_root = rotate_with_left(root)

    assert shape(new_root) == (2, (1, None, None), (3, None, None))
    assert new_root.height == 1
    assert new_root.right.height == 0


def test_rotate_with_right_promotes_right_child():
    root = link(1, right=link(2, right=link(3)))
    new_root = rotate_with_right(root)

    assert shape(new_root) == (2, (1, None, None), (3, None, None))
    assert new_root.height == 1
    assert new_root.left.height == 0


def test_rotation_moves_inner_subtree():
    # 4 is the inner child of 3 and must end up as the left child of 6
    root = link(6, left=link(3, left=link(2), right=link(4)), right=link(7))
    new_root = rotate_with_left(root)

    assert shape(new_root) == (3, (2, None, None), (6, (4, None, None), (7, None, None)))
    assert new_root.right.height == 1
    assert new_root.height == 2


def test_double_with_left_resolves_zig_zag():
    root = link(3, left=link(1, right=link(2)))
    new_root = double_with_left(root)

    assert shape(new_root) == (2, (1, None, None), (3, None, None))
    assert new_root.height == 1


def test_double_with_right_resolves_zig_zag():
    root = link(1, right=link(3, left=link(2)))
    new_root = double_with_right(root)

    assert shape(new_root) == (2, (1, None, None), (3, None, None))
    assert new_root.height == 1


def test_rebalance_none():
    assert rebalance(None) is None


def test_rebalance_balanced_node_only_refreshes_height():
    left = link(1)
    right = link(3)
    root = TreeNode(2)
    root.left, root.right = left, right
    root.height = 7  # stale cache

    result = rebalance(root)

    assert result is root
    assert root.height == 1


def test_rebalance_left_left_uses_single_rotation():
    root = link(3, left=link(2, left=link(1)))
    assert balance_factor(root) == 2

    new_root = rebalance(root)

    assert shape(new_root) == (2, (1, None, None), (3, None, None))


def test_rebalance_right_right_uses_single_rotation():
    root = link(1, right=link(2, right=link(3)))
    new_root = rebalance(root)

    assert shape(new_root) == (2, (1, None, None), (3, None, None))


def test_rebalance_left_right_uses_double_rotation():
    root = link(3, left=link(1, right=link(2)))
    new_root = rebalance(root)

    assert shape(new_root) == (2, (1, None, None), (3, None, None))


def test_rebalance_right_left_uses_double_rotation():
    root = link(1, right=link(3, left=link(2)))
    new_root = rebalance(root)

    assert shape(new_root) == (2, (1, None, None), (3, None, None))


def test_rebalance_tie_on_left_prefers_single_rotation():
    # Only reachable after a removal: both grandchildren equally tall
    root = link(10, left=link(5, left=link(3), right=link(7)))
    new_root = rebalance(root)

    assert shape(new_root) == (5, (3, None, None), (10, (7, None, None), None))
    assert new_root.height == 2
    assert abs(balance_factor(new_root)) <= 1
    assert abs(balance_factor(new_root.right)) <= 1


def test_rebalance_tie_on_right_prefers_single_rotation():
    root = link(1, right=link(5, left=link(3), right=link(7)))
    new_root = rebalance(root)

    assert shape(new_root) == (5, (1, None, (3, None, None)), (7, None, None))
    assert new_root.height == 2
    assert abs(balance_factor(new_root.left)) <= 1
