"""Testing utilities for AVLTreeLib.

This module provides test fixtures and utilities for projects that use
AVLTreeLib and need to verify tree structure in their own test suites.
"""

from .fixtures import (
    check_invariants,
    assert_invariants,
    snapshot,
    node_heights,
)

__all__ = [
    'check_invariants',
    'assert_invariants',
    'snapshot',
    'node_heights',
]
