"""Recursive tree operations for AVLTreeLib.

Each mutating operation descends from a subtree root guided by the
comparator, changes the tree at or below the matching position and runs
rebalance() on every node of the path on the way back up. All of them
return the new subtree root, which the caller reattaches to its parent.
"""

from typing import Any, Optional
from ..config import TreeOps
from .node import TreeNode
from .balance import rebalance


def insert_node(root: Optional[TreeNode], ops: TreeOps, payload: Any) -> TreeNode:
    """Insert a payload, aggregating duplicates.

    An equal key only increments the existing node's count; if the tree
    owns payloads the redundant incoming payload is disposed of, unless it
    is the very object already stored.

    Args:
        root: Subtree root (None for an empty subtree)
        ops: Ops descriptor of the tree
        payload: Object to insert

    Returns:
        New subtree root
    """
    if root is None:
        return TreeNode(payload)

    cmp = ops.compare(payload, root.payload)
    if cmp < 0:
        root.left = insert_node(root.left, ops, payload)
    elif cmp > 0:
        root.right = insert_node(root.right, ops, payload)
    else:
        if root.payload is not payload:
            ops.dispose(payload)
        root.count += 1
    return rebalance(root)


def replace_node(root: Optional[TreeNode], ops: TreeOps, payload: Any) -> TreeNode:
    """Insert a payload, overwriting the stored payload of an equal key.

    The count of an existing node is left untouched; a missing key is
    inserted with count 1.

    Args:
        root: Subtree root (None for an empty subtree)
        ops: Ops descriptor of the tree
        payload: Object to store

    Returns:
        New subtree root
    """
    if root is None:
        return TreeNode(payload)

    cmp = ops.compare(payload, root.payload)
    if cmp < 0:
        root.left = replace_node(root.left, ops, payload)
    elif cmp > 0:
        root.right = replace_node(root.right, ops, payload)
    elif root.payload is not payload:
        ops.dispose(root.payload)
        root.payload = payload
    return rebalance(root)


def find_min(root: TreeNode) -> TreeNode:
    """Leftmost node of a non-empty subtree."""
    while root.left is not None:
        root = root.left
    return root


def remove_node(root: Optional[TreeNode],
                ops: TreeOps,
                key: Any,
                owns_payloads: bool = True) -> Optional[TreeNode]:
    """Remove the node matching key, whatever its count.

    A node with two children takes over the payload and count of its
    in-order successor, and the successor is then removed from the right
    subtree with ``owns_payloads=False`` so its relocated payload is not
    disposed of a second time.

    Args:
        root: Subtree root
        ops: Ops descriptor of the tree
        key: Object comparing equal to the payload to remove
        owns_payloads: Dispose of the removed payload if the tree owns it

    Returns:
        New subtree root (unchanged structure if key is absent)
    """
    if root is None:
        return None

    cmp = ops.compare(key, root.payload)
    if cmp < 0:
        root.left = remove_node(root.left, ops, key, owns_payloads)
    elif cmp > 0:
        root.right = remove_node(root.right, ops, key, owns_payloads)
    elif root.left is not None and root.right is not None:
        successor = find_min(root.right)
        if owns_payloads:
            ops.dispose(root.payload)
        root.payload = successor.payload
        root.count = successor.count
        root.right = remove_node(root.right, ops, successor.payload, owns_payloads=False)
    else:
        if owns_payloads:
            ops.dispose(root.payload)
        return rebalance(root.left if root.left is not None else root.right)
    return rebalance(root)


def search_node(root: Optional[TreeNode], ops: TreeOps, key: Any) -> Optional[TreeNode]:
    """Find the node whose payload compares equal to key.

    Returns:
        Matching node or None
    """
    if root is None:
        return None

    cmp = ops.compare(key, root.payload)
    if cmp < 0:
        return search_node(root.left, ops, key)
    if cmp > 0:
        return search_node(root.right, ops, key)
    return root


def count_key(root: Optional[TreeNode], ops: TreeOps, key: Any) -> int:
    """Number of insertions aggregated under key, 0 if absent."""
    node = search_node(root, ops, key)
    return node.count if node is not None else 0


def subtree_size(root: Optional[TreeNode]) -> int:
    """Number of nodes (distinct keys) in a subtree."""
    if root is None:
        return 0
    return 1 + subtree_size(root.left) + subtree_size(root.right)


def destroy_subtree(root: Optional[TreeNode], ops: TreeOps) -> int:
    """Release every node of a subtree in post-order.

    Each node is unlinked before its payload is disposed of, so a failing
    destructor never leaves a half-released node reachable.

    Returns:
        Number of nodes released
    """
    if root is None:
        return 0

    left, right, payload = root.left, root.right, root.payload
    root.left = root.right = None
    root.payload = None
    released = destroy_subtree(left, ops) + destroy_subtree(right, ops)
    ops.dispose(payload)
    return released + 1
