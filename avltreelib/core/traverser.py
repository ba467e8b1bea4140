"""Tree traversal strategies for AVLTreeLib.

Traversers walk a whole tree and hand every stored payload to a visitor.
A visitor returns VisitResult.CONTINUE (or any falsy value) to keep going
and VisitResult.STOP (or any truthy value) to end the walk at once; the
stop propagates through the left/self/right composition without touching
the remaining nodes.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Union
from ..config import TraversalOrder
from .node import TreeNode

Visitor = Callable[[Any], Any]


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    With ``counted`` set, a node's payload is visited ``count`` times in a
    row, materializing the duplicates aggregated in that node.
    """

    def __init__(self, counted: bool = False):
        """Initialize traverser.

        Args:
            counted: Visit each payload once per aggregated insertion
        """
        self.counted = counted

    @abstractmethod
    def traverse(self, root: Optional[TreeNode], visitor: Visitor) -> bool:
        """Traverse the subtree rooted at root.

        Args:
            root: Subtree root (None for an empty tree)
            visitor: Callable receiving each payload

        Returns:
            True if the visitor requested an early stop
        """
        pass

    def _visit(self, node: TreeNode, visitor: Visitor) -> bool:
        """Apply the visitor to one node, honoring ``counted``."""
        repeat = node.count if self.counted else 1
        for _ in range(repeat):
            if visitor(node.payload):
                return True
        return False


class InOrderTraverser(TreeTraverser):
    """Left subtree, node, right subtree: payloads in comparator order."""

    def traverse(self, root: Optional[TreeNode], visitor: Visitor) -> bool:
        if root is None:
            return False
        return (self.traverse(root.left, visitor)
                or self._visit(root, visitor)
                or self.traverse(root.right, visitor))


class PreOrderTraverser(TreeTraverser):
    """Node before its subtrees. Good for reproducing the tree's shape."""

    def traverse(self, root: Optional[TreeNode], visitor: Visitor) -> bool:
        if root is None:
            return False
        return (self._visit(root, visitor)
                or self.traverse(root.left, visitor)
                or self.traverse(root.right, visitor))


class PostOrderTraverser(TreeTraverser):
    """Subtrees before their node. Good for release or aggregation."""

    def traverse(self, root: Optional[TreeNode], visitor: Visitor) -> bool:
        if root is None:
            return False
        return (self.traverse(root.left, visitor)
                or self.traverse(root.right, visitor)
                or self._visit(root, visitor))


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse traversal order from string or enum.

    Args:
        order: Order as enum or string

    Returns:
        TraversalOrder enum value

    Raises:
        ValueError: If order name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    order_map = {
        'in': TraversalOrder.IN_ORDER,
        'inorder': TraversalOrder.IN_ORDER,
        'in_order': TraversalOrder.IN_ORDER,
        'pre': TraversalOrder.PRE_ORDER,
        'preorder': TraversalOrder.PRE_ORDER,
        'pre_order': TraversalOrder.PRE_ORDER,
        'post': TraversalOrder.POST_ORDER,
        'postorder': TraversalOrder.POST_ORDER,
        'post_order': TraversalOrder.POST_ORDER,
    }

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in order_map:
        return order_map[order_lower]

    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(order_map.keys())}"
    )


def create_traverser(order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
                     counted: bool = False) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: Traversal order (enum or name such as "inorder", "pre")
        counted: Visit each payload once per aggregated insertion

    Returns:
        TreeTraverser instance
    """
    traversers = {
        TraversalOrder.IN_ORDER: InOrderTraverser,
        TraversalOrder.PRE_ORDER: PreOrderTraverser,
        TraversalOrder.POST_ORDER: PostOrderTraverser,
    }
    return traversers[parse_order(order)](counted=counted)


def traverse(root: Optional[TreeNode],
             visitor: Visitor,
             order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
             counted: bool = False) -> bool:
    """Traverse a subtree with a visitor.

    Returns:
        True if the visitor requested an early stop
    """
    return create_traverser(order, counted).traverse(root, visitor)
