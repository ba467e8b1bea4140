"""Tests for traversal orders, counted traversal and early termination."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from avltreelib import AVLTree, TraversalOrder, VisitResult, collect_values, natural_compare
from avltreelib.core.traverser import (
    InOrderTraverser,
    PostOrderTraverser,
    PreOrderTraverser,
    create_traverser,
    parse_order,
    traverse,
)


@pytest.fixture
def seven():
    """Perfect tree 4(2(1,3), 6(5,7))."""
    tree = AVLTree(natural_compare)
    for v in range(1, 8):
        tree.insert(v)
    yield tree
    tree.destroy()


class StopAfter:
    """Visitor that records payloads and stops after n visits."""

    def __init__(self, n):
        self.n = n
        self.seen = []

    def __call__(self, payload):
        self.seen.append(payload)
        if len(self.seen) >= self.n:
            return VisitResult.STOP
        return VisitResult.CONTINUE


def test_inorder_is_sorted(seven):
    assert collect_values(seven) == [1, 2, 3, 4, 5, 6, 7]


def test_preorder(seven):
    assert collect_values(seven, order=TraversalOrder.PRE_ORDER) == [4, 2, 1, 3, 6, 5, 7]


def test_postorder(seven):
    assert collect_values(seven, order="post") == [1, 3, 2, 5, 7, 6, 4]


def test_full_traversal_reports_not_stopped(seven):
    visitor = StopAfter(100)
    assert seven.traverse(visitor) is False
    assert len(visitor.seen) == 7


def test_empty_tree_traversal():
    tree = AVLTree(natural_compare)
    seen = []
    assert tree.traverse(seen.append) is False
    assert tree.traverse_counted(seen.append) is False
    assert seen == []


@pytest.mark.parametrize("order", list(TraversalOrder))
def test_stop_after_third_element(seven, order):
    visitor = StopAfter(3)
    assert seven.traverse(visitor, order=order) is True
    assert len(visitor.seen) == 3


@pytest.mark.parametrize("values", [
    list(range(20)),
    list(range(20, 0, -1)),
    [5, 1, 9, 3, 7, 2, 8],
])
def test_stop_count_independent_of_shape(values):
    tree = AVLTree(natural_compare)
    for v in values:
        tree.insert(v)
    visitor = StopAfter(3)
    assert tree.traverse(visitor) is True
    assert visitor.seen == sorted(values)[:3]


def test_counted_traversal_repeats_duplicates():
    tree = AVLTree(natural_compare)
    for v in (2, 2, 2, 1, 3, 3):
        tree.insert(v)
    assert collect_values(tree) == [1, 2, 3]
    assert collect_values(tree, counted=True) == [1, 2, 2, 2, 3, 3]


def test_counted_traversal_can_stop_inside_a_run():
    tree = AVLTree(natural_compare)
    for _ in range(5):
        tree.insert(7)
    visitor = StopAfter(2)
    assert tree.traverse_counted(visitor) is True
    assert visitor.seen == [7, 7]


def test_visitor_returning_none_continues(seven):
    seen = []

    def visit(payload):
        seen.append(payload)

    assert seven.traverse(visit) is False
    assert seen == [1, 2, 3, 4, 5, 6, 7]


def test_integer_visitor_results(seven):
    """C-style visitors: 0 continues, non-zero stops."""
    seen = []

    def below_five(payload):
        if payload < 5:
            seen.append(payload)
            return 0
        return 1

    assert seven.traverse(below_five) is True
    assert seen == [1, 2, 3, 4]


def test_conditional_sum(seven):
    total = 0

    def add_until_over(payload):
        nonlocal total
        total += payload
        return total > 6

    assert seven.traverse(add_until_over) is True
    assert total == 10


def test_parse_order():
    assert parse_order("inorder") is TraversalOrder.IN_ORDER
    assert parse_order("PRE") is TraversalOrder.PRE_ORDER
    assert parse_order("post_order") is TraversalOrder.POST_ORDER
    assert parse_order(TraversalOrder.IN_ORDER) is TraversalOrder.IN_ORDER


def test_parse_order_rejects_unknown():
    with pytest.raises(ValueError, match="Unknown traversal order"):
        parse_order("level")


def test_create_traverser():
    assert isinstance(create_traverser(), InOrderTraverser)
    assert isinstance(create_traverser("pre"), PreOrderTraverser)
    traverser = create_traverser(TraversalOrder.POST_ORDER, counted=True)
    assert isinstance(traverser, PostOrderTraverser)
    assert traverser.counted is True


def test_module_level_traverse_on_raw_nodes(seven):
    seen = []
    stopped = traverse(seven._root, seen.append, order="pre")
    assert stopped is False
    assert seen == [4, 2, 1, 3, 6, 5, 7]
    assert traverse(None, seen.append) is False


def test_visitor_exception_propagates(seven):
    def explode(payload):
        if payload == 3:
            raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        seven.traverse(explode)
    assert seven.size() == 7
