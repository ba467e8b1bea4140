"""Balancing engine for AVLTreeLib.

Pure structural functions over TreeNode graphs. Every function takes the
root of a subtree and returns the (possibly different) new root; the
caller is responsible for reattaching it to the parent. Nothing here
looks at payloads.
"""

from typing import Optional
from .node import TreeNode

MAX_IMBALANCE = 1


def height(node: Optional[TreeNode]) -> int:
    """Height of a subtree, -1 for an absent one."""
    return node.height if node is not None else -1


def update_height(node: TreeNode) -> None:
    """Recompute the cached height from the children."""
    node.height = max(height(node.left), height(node.right)) + 1


def balance_factor(node: Optional[TreeNode]) -> int:
    """Height of the left subtree minus height of the right subtree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def rotate_with_left(root: TreeNode) -> TreeNode:
    """Single right rotation: promote the left child.

    Args:
        root: Subtree root with a left child

    Returns:
        The former left child, now the subtree root
    """
    new_root = root.left
    root.left = new_root.right
    new_root.right = root
    update_height(root)
    update_height(new_root)
    return new_root


def rotate_with_right(root: TreeNode) -> TreeNode:
    """Single left rotation: promote the right child.

    Args:
        root: Subtree root with a right child

    Returns:
        The former right child, now the subtree root
    """
    new_root = root.right
    root.right = new_root.left
    new_root.left = root
    update_height(root)
    update_height(new_root)
    return new_root


def double_with_left(root: TreeNode) -> TreeNode:
    """Left-right case: rotate the left child away, then rotate the root."""
    root.left = rotate_with_right(root.left)
    return rotate_with_left(root)


def double_with_right(root: TreeNode) -> TreeNode:
    """Right-left case: rotate the right child away, then rotate the root."""
    root.right = rotate_with_left(root.right)
    return rotate_with_right(root)


def rebalance(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Restore the AVL property at a subtree root and refresh its height.

    Both children must already be valid AVL trees and the imbalance at
    ``root`` at most 2, which holds after a single insertion or removal
    below it. A double rotation is chosen only when the inner grandchild
    on the heavy side is strictly taller than the outer one.

    Args:
        root: Subtree root, or None

    Returns:
        New subtree root (None for an absent subtree)
    """
    if root is None:
        return None

    if height(root.left) - height(root.right) > MAX_IMBALANCE:
        if height(root.left.left) >= height(root.left.right):
            root = rotate_with_left(root)
        else:
            root = double_with_left(root)
    elif height(root.right) - height(root.left) > MAX_IMBALANCE:
        if height(root.right.right) >= height(root.right.left):
            root = rotate_with_right(root)
        else:
            root = double_with_right(root)

    update_height(root)
    return root
