"""AVLTreeLib - Generic self-balancing binary search tree.

AVLTreeLib stores arbitrary objects under a user-supplied three-way
ordering, keeps the tree height-balanced (AVL discipline) under insertion
and removal, aggregates duplicate keys into counts and can optionally own
the lifetime of its payloads through an injected destructor.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from avltreelib import AVLTree, natural_compare

    tree = AVLTree(natural_compare)
    tree.insert(3)
    tree.traverse(print)
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .config import (
    TreeOps,
    TraversalOrder,
    VisitResult,
    MarkovConfig,
    natural_compare,
    compare_by,
)
from .errors import (
    TreeError,
    InvalidOpsError,
    TreeDestroyedError,
    InvalidConfigurationError,
    MarkovError,
    UnknownWordError,
)
from .tree import AVLTree
from .api import (
    create_tree,
    collect_values,
    sum_until,
    find_first,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Config
    "TreeOps",
    "TraversalOrder",
    "VisitResult",
    "MarkovConfig",
    "natural_compare",
    "compare_by",
    # Errors
    "TreeError",
    "InvalidOpsError",
    "TreeDestroyedError",
    "InvalidConfigurationError",
    "MarkovError",
    "UnknownWordError",
    # Container
    "AVLTree",
    # API
    "create_tree",
    "collect_values",
    "sum_until",
    "find_first",
    "get_tree_stats",
]
