"""TreeNode for AVLTreeLib.

The TreeNode is intentionally kept simple - it's a data container.
Ordering, balancing and ownership are handled by the functions in
balance.py and operations.py, which receive the ops descriptor explicitly.
"""

from typing import Any, Optional


class TreeNode:
    """A node holding one distinct key of an AVL tree.

    Duplicates of the key (under the tree's comparator) are aggregated in
    ``count`` rather than stored as separate nodes. ``height`` caches
    1 + max(height(left), height(right)), where an absent subtree has
    height -1, so a freshly created node is a valid one-node tree of
    height 0.
    """

    __slots__ = 'payload', 'count', 'left', 'right', 'height'

    def __init__(self, payload: Any):
        self.payload: Any = payload
        self.count: int = 1
        self.left: Optional['TreeNode'] = None
        self.right: Optional['TreeNode'] = None
        self.height: int = 0

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(payload={self.payload!r}, "
                f"count={self.count}, height={self.height})")
