"""Core building blocks of AVLTreeLib.

This package contains the node type, the balancing engine, the recursive
tree operations and the traversal strategies used by AVLTree.
"""

from .node import TreeNode
from .balance import (
    MAX_IMBALANCE,
    height,
    rebalance,
)
from .operations import (
    insert_node,
    replace_node,
    remove_node,
    search_node,
    count_key,
    subtree_size,
    destroy_subtree,
)
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
    parse_order,
    traverse,
)

__all__ = [
    "TreeNode",
    "MAX_IMBALANCE",
    "height",
    "rebalance",
    "insert_node",
    "replace_node",
    "remove_node",
    "search_node",
    "count_key",
    "subtree_size",
    "destroy_subtree",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "create_traverser",
    "parse_order",
    "traverse",
]
