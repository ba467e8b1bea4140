"""AVLTree container for AVLTreeLib.

The AVLTree is the externally visible handle: it holds the root node and
the ops descriptor fixed at construction, and exposes the public
operations. The heavy lifting is delegated to the functions in
avltreelib.core.

Single-threaded by design: a tree has exactly one logical owner, and
concurrent use must be serialized by the caller.
"""

import functools
import logging
from typing import Any, Optional, Union

from .config import Comparator, Destructor, TraversalOrder, TreeOps
from .core.node import TreeNode
from .core.balance import height as _height
from .core.operations import (
    insert_node,
    replace_node,
    remove_node,
    search_node,
    count_key,
    subtree_size,
    destroy_subtree,
)
from .core.traverser import Visitor, create_traverser
from .errors import InvalidOpsError, TreeDestroyedError

logger = logging.getLogger(__name__)


def _alive(method):
    """Reject calls on a destroyed tree."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        if self._destroyed:
            raise TreeDestroyedError(
                f"{method.__name__}() called on a destroyed {self.__class__.__name__}"
            )
        return method(self, *args, **kwargs)
    return wrapper


class AVLTree:
    """Self-balancing binary search tree over opaque payloads.

    Payloads are ordered by a three-way comparator and equal payloads are
    aggregated into one node with a duplicate count. When a destructor is
    supplied the tree owns its payloads and disposes of every payload it
    discards: a rejected duplicate, a payload overwritten by replace(), a
    removed payload and everything left at destroy().

    Example:
        >>> from avltreelib import natural_compare
        >>> tree = AVLTree(natural_compare)
        >>> for value in (3, 1, 2, 3):
        ...     tree.insert(value)
        >>> tree.count(3), tree.size(), tree.height()
        (2, 3, 1)
    """

    def __init__(self, compare: Comparator, destroy: Optional[Destructor] = None):
        """Create an empty tree.

        Args:
            compare: Three-way comparator (negative, zero, positive)
            destroy: Optional payload destructor; makes the tree own payloads

        Raises:
            InvalidOpsError: If the descriptor is unusable
        """
        ops = TreeOps(compare=compare, destroy=destroy)
        errors = ops.validate()
        if errors:
            raise InvalidOpsError(f"Invalid tree ops: {'; '.join(errors)}")

        self._ops = ops
        self._root: Optional[TreeNode] = None
        self._destroyed = False
        logger.debug("Created AVLTree (owns_payloads=%s)", ops.owns_payloads)

    @classmethod
    def from_ops(cls, ops: TreeOps) -> 'AVLTree':
        """Create an empty tree from an existing ops descriptor."""
        return cls(ops.compare, ops.destroy)

    @property
    def ops(self) -> TreeOps:
        """The ops descriptor, fixed for the tree's lifetime."""
        return self._ops

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    # Mutating operations

    @_alive
    def insert(self, payload: Any) -> None:
        """Insert a payload; an equal key only increments its count.

        If the tree owns payloads, the duplicate payload is disposed of.
        """
        self._root = insert_node(self._root, self._ops, payload)

    @_alive
    def replace(self, payload: Any) -> None:
        """Store a payload, overwriting the payload of an equal key.

        The duplicate count of an existing key is left unchanged; the
        overwritten payload is disposed of if the tree owns it.
        """
        self._root = replace_node(self._root, self._ops, payload)

    @_alive
    def remove(self, key: Any) -> None:
        """Remove the node for key with all its duplicates.

        Removing an absent key is a no-op.
        """
        self._root = remove_node(self._root, self._ops, key, self._ops.owns_payloads)

    # Read-only operations

    @_alive
    def search(self, key: Any, default: Any = None) -> Any:
        """Return the stored payload comparing equal to key, or default."""
        node = search_node(self._root, self._ops, key)
        return node.payload if node is not None else default

    @_alive
    def count(self, key: Any) -> int:
        """Number of insertions aggregated under key, 0 if absent."""
        return count_key(self._root, self._ops, key)

    @_alive
    def size(self) -> int:
        """Number of distinct keys (nodes) in the tree."""
        return subtree_size(self._root)

    @_alive
    def height(self) -> int:
        """Height of the tree: -1 if empty, 0 for a single node."""
        return _height(self._root)

    @_alive
    def root_payload(self) -> Any:
        """Payload stored at the root, or None if the tree is empty."""
        return self._root.payload if self._root is not None else None

    @_alive
    def traverse(self,
                 visitor: Visitor,
                 order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
                 counted: bool = False) -> bool:
        """Visit every payload until the visitor asks to stop.

        Args:
            visitor: Callable receiving each payload; a truthy return
                (e.g. VisitResult.STOP) ends the traversal
            order: Traversal order, in-order (sorted) by default
            counted: Visit each payload once per aggregated insertion

        Returns:
            True if the visitor requested an early stop
        """
        return create_traverser(order, counted).traverse(self._root, visitor)

    def traverse_counted(self,
                         visitor: Visitor,
                         order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> bool:
        """Traverse visiting each payload ``count`` times in a row."""
        return self.traverse(visitor, order=order, counted=True)

    # Lifecycle

    @_alive
    def destroy(self) -> None:
        """Release every node and owned payload.

        The tree cannot be used afterwards; any further call, including a
        second destroy(), raises TreeDestroyedError. This also holds when
        the destructor raises part way through; the error propagates and the
        nodes not yet released are dropped.
        """
        root, self._root = self._root, None
        try:
            released = destroy_subtree(root, self._ops)
        finally:
            self._destroyed = True
        logger.debug("Destroyed AVLTree, released %d nodes", released)

    def __enter__(self) -> 'AVLTree':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if not self._destroyed:
            self.destroy()

    # Python protocol sugar

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        if self._destroyed:
            raise TreeDestroyedError(f"__bool__() called on a destroyed {self.__class__.__name__}")
        return self._root is not None

    def __contains__(self, key: Any) -> bool:
        return self.count(key) > 0

    def __repr__(self) -> str:
        if self._destroyed:
            return f"{self.__class__.__name__}(<destroyed>)"
        return (f"{self.__class__.__name__}(size={self.size()}, "
                f"height={self.height()}, owns_payloads={self._ops.owns_payloads})")
