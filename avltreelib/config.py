"""Configuration system for AVLTreeLib.

This module defines how users describe a tree to the library: the ops
descriptor (ordering and optional payload destructor), the traversal
orders and visitor signals, and the settings of the bundled Markov demo.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Callable, List, Optional


Comparator = Callable[[Any, Any], int]
Destructor = Callable[[Any], None]


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the objects' own ordering.

    Returns:
        Negative if a < b, zero if equal, positive if a > b
    """
    return (a > b) - (a < b)


def compare_by(key_func: Callable[[Any], Any]) -> Comparator:
    """Build a three-way comparator that orders payloads by a derived key.

    Args:
        key_func: Function extracting the sort key from a payload

    Returns:
        Comparator suitable for TreeOps

    Example:
        >>> ops = TreeOps(compare=compare_by(lambda w: w.text))
    """
    def compare(a: Any, b: Any) -> int:
        return natural_compare(key_func(a), key_func(b))
    return compare


class TraversalOrder(Enum):
    """Order in which a traversal visits the stored payloads."""
    IN_ORDER = "inorder"        # Left, self, right (sorted)
    PRE_ORDER = "preorder"      # Self before children
    POST_ORDER = "postorder"    # Children before self


class VisitResult(IntEnum):
    """Signal returned by a traversal visitor.

    CONTINUE is falsy and STOP is truthy, so visitors may also return
    plain integers or booleans (None counts as CONTINUE).
    """
    CONTINUE = 0
    STOP = 1


@dataclass(frozen=True)
class TreeOps:
    """Behaviors injected into a tree at construction.

    The comparator must be a consistent total order for the lifetime of
    the tree. When ``destroy`` is given the tree owns its payloads and
    calls it on every payload it discards; otherwise the caller keeps
    ownership and the tree never disposes of anything.
    """

    compare: Comparator
    destroy: Optional[Destructor] = None

    @property
    def owns_payloads(self) -> bool:
        """True if the tree is responsible for disposing payloads."""
        return self.destroy is not None

    def dispose(self, payload: Any) -> None:
        """Release a payload the tree no longer holds, if it owns it."""
        if self.destroy is not None:
            self.destroy(payload)

    def validate(self) -> List[str]:
        """Validate the descriptor.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not callable(self.compare):
            errors.append("compare must be callable")
        if self.destroy is not None and not callable(self.destroy):
            errors.append("destroy must be callable or None")
        return errors


@dataclass
class MarkovConfig:
    """Settings for generating a word chain from a transition table."""

    out_len: int = 30                   # Words to generate
    initial_word: Optional[str] = None  # None = start at the root word
    delimiter: str = " "                # Token separator characters
    print_stats: bool = False           # Dump the transition table
    wrap: bool = False                  # Break long output lines
    wrap_width: int = 80                # Line length that triggers a break
    seed: Optional[int] = None          # Random seed for reproducible chains

    @classmethod
    def quick(cls, out_len: int = 10, seed: Optional[int] = None) -> 'MarkovConfig':
        """Create config for a short, optionally reproducible chain.

        Args:
            out_len: Number of words to generate
            seed: Random seed

        Returns:
            MarkovConfig with defaults for everything else
        """
        return cls(out_len=out_len, seed=seed)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.out_len < 0:
            errors.append("out_len cannot be negative")

        if not self.delimiter:
            errors.append("delimiter cannot be empty")

        if self.wrap_width <= 0:
            errors.append("wrap_width must be positive")

        if self.initial_word is not None and not self.initial_word:
            errors.append("initial_word cannot be an empty string")

        return errors
