"""Integer driver program exercising every AVLTree operation.

Fills an owning tree with random small integers (so duplicates are
common) and prints the results of the traversals, aggregate queries and
removals to a text stream.
"""

import logging
import random
import sys
from typing import List, Optional, TextIO

from .api import collect_values, sum_until
from .config import TraversalOrder, natural_compare
from .tree import AVLTree

logger = logging.getLogger(__name__)


class IntBox:
    """Owned integer payload that records its own disposal."""

    __slots__ = 'value', 'disposed'

    def __init__(self, value: int):
        self.value = value
        self.disposed = False

    def __repr__(self) -> str:
        return f"IntBox({self.value})"


def compare_boxes(a: IntBox, b: IntBox) -> int:
    return natural_compare(a.value, b.value)


def dispose_box(box: IntBox) -> None:
    box.disposed = True


def _print_values(tree: AVLTree, out: TextIO,
                  order: TraversalOrder = TraversalOrder.IN_ORDER) -> None:
    for box in collect_values(tree, order=order):
        print(box.value, file=out)


def run_demo(out: Optional[TextIO] = None,
             count: int = 16,
             seed: Optional[int] = None,
             modulo: int = 10) -> List[IntBox]:
    """Run the driver and write its report to ``out`` (stdout by default).

    Args:
        out: Text stream for the report
        count: Number of random values to insert
        seed: Random seed for a reproducible run
        modulo: Values are drawn from range(modulo)

    Returns:
        Every box created, so callers can check they were all disposed of
    """
    out = out if out is not None else sys.stdout
    rng = random.Random(seed)
    boxes = [IntBox(rng.randrange(modulo)) for _ in range(count)]
    for i, box in enumerate(boxes):
        print(f"arr[{i}] = {box.value}", file=out)
    print(file=out)

    with AVLTree(compare_boxes, dispose_box) as tree:
        for box in boxes:
            tree.insert(box)
        logger.debug("Inserted %d values into %d nodes", count, tree.size())

        for order in TraversalOrder:
            print(f"{order.value}:", file=out)
            _print_values(tree, out, order)
            print(file=out)

        print(f"height = {tree.height()}", file=out)
        print(f"sum = {sum_until(tree, float('inf'), lambda b: b.value)}", file=out)
        print(f"sum lt 5 = {sum_until(tree, 5, lambda b: b.value)}", file=out)
        print(f"count of 3 = {tree.count(IntBox(3))}", file=out)

        plain = [box.value for box in collect_values(tree)]
        counted = [box.value for box in collect_values(tree, counted=True)]
        print(f"elements = {plain}", file=out)
        print(f"elements counted = {counted}", file=out)

        print("\nTesting remove function", file=out)
        for key in (5, 65536, 3):
            tree.remove(IntBox(key))
            print(f"Removed {key}: {[box.value for box in collect_values(tree)]}", file=out)

    return boxes
