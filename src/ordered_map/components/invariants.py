"""Recursive structure checks for the tree.

Used by tests and by TreeMap when TreeMapConfig.check_invariants is set.
"""

from __future__ import annotations

from typing import Optional

from ..core.errors import InvariantViolationError
from ..core.types import K, V
from .llrb import is_red, size
from .node import Node


def check_order(node: Optional[Node[K, V]]) -> None:
    """Every key must sit strictly between the bounds inherited from its ancestors."""

    def _check(node: Optional[Node[K, V]], low, high) -> None:
        if node is None:
            return
        if low is not None and not low < node.key:
            raise InvariantViolationError(f"key {node.key!r} is not greater than {low!r}")
        if high is not None and not node.key < high:
            raise InvariantViolationError(f"key {node.key!r} is not less than {high!r}")
        _check(node.left, low, node.key)
        _check(node.right, node.key, high)

    _check(node, None, None)


def check_sizes(node: Optional[Node[K, V]]) -> None:
    if node is None:
        return
    check_sizes(node.left)
    check_sizes(node.right)
    expected = size(node.left) + size(node.right) + 1
    if node.size != expected:
        raise InvariantViolationError(
            f"node {node.key!r} has size {node.size}, expected {expected}"
        )


def check_colors(root: Optional[Node[K, V]]) -> None:
    """
    Checks the left-leaning red-black rules:
    black root, no red right links, no two red links in a row,
    and the same number of black links on every root-to-leaf path.
    """
    if root is None:
        return
    if is_red(root):
        raise InvariantViolationError(f"root {root.key!r} is red")

    def _black_height(node: Optional[Node[K, V]]) -> int:
        if node is None:
            return 0
        if is_red(node.right):
            raise InvariantViolationError(f"node {node.key!r} has a red right child")
        if is_red(node) and is_red(node.left):
            raise InvariantViolationError(f"node {node.key!r} and its left child are both red")
        left = _black_height(node.left)
        right = _black_height(node.right)
        if left != right:
            raise InvariantViolationError(
                f"black height differs below {node.key!r}: {left} left, {right} right"
            )
        return left + (0 if is_red(node) else 1)

    _black_height(root)


def check_tree(root: Optional[Node[K, V]], colors: bool = True) -> None:
    """Runs every check; colors are skipped when they are known to be stale."""
    check_order(root)
    check_sizes(root)
    if colors:
        check_colors(root)
