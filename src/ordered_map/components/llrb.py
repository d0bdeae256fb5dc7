"""
Left-leaning red-black tree engine.

Insertion keeps the LLRB color rules (red links lean left, no two red
links in a row, uniform black height). Deletion is plain Hibbard
deletion: it keeps key order and subtree sizes exact but never recolors
or rotates, so color bits are stale once anything has been removed.

Every function takes and returns subtree roots; callers reassign the
returned root to the link they descended through.

Time Complexity (insert-only trees): O(log n) for insert/find/delete
Space Complexity: O(log n) recursion stack
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from ..core.types import BLACK, RED, Entry, K, V
from .node import Node


def is_red(node: Optional[Node[K, V]]) -> bool:
    # empty links are black
    if node is None:
        return False
    return node.color == RED


def size(node: Optional[Node[K, V]]) -> int:
    if node is None:
        return 0
    return node.size


def _resize(node: Node[K, V]) -> None:
    node.size = size(node.left) + size(node.right) + 1


def rotate_left(node: Node[K, V]) -> Node[K, V]:
    """
    Promotes the right child of node to its position.
    The promoted child inherits node's color and node becomes red.
    """
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    pivot.color = node.color
    node.color = RED
    pivot.size = node.size
    _resize(node)
    return pivot


def rotate_right(node: Node[K, V]) -> Node[K, V]:
    """Mirror image of rotate_left: promotes the left child."""
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    pivot.color = node.color
    node.color = RED
    pivot.size = node.size
    _resize(node)
    return pivot


def flip_colors(node: Node[K, V]) -> None:
    """Splits a temporary 4-node: node turns red, both children black."""
    assert node.left is not None and node.right is not None
    node.color = RED
    node.left.color = BLACK
    node.right.color = BLACK


def insert(
    node: Optional[Node[K, V]], key: K, value: V
) -> tuple[Node[K, V], Optional[Entry[K, V]]]:
    """
    Inserts or updates key below node.
    Returns the new subtree root and the entry the key held before
    the call, or None if the key is new.
    The caller is responsible for blackening the tree root.
    """
    if node is None:
        return Node(key, value, RED, 1), None

    previous: Optional[Entry[K, V]] = None
    if key < node.key:
        node.left, previous = insert(node.left, key, value)
    elif key > node.key:
        node.right, previous = insert(node.right, key, value)
    else:
        previous = Entry(node.key, node.value)
        node.value = value

    # Order matters: each fixup can set up the next one
    if is_red(node.right) and not is_red(node.left):
        node = rotate_left(node)
    if is_red(node.left) and is_red(node.left.left):
        node = rotate_right(node)
    if is_red(node.left) and is_red(node.right):
        flip_colors(node)

    _resize(node)
    return node, previous


def find(node: Optional[Node[K, V]], key: K) -> Optional[Node[K, V]]:
    """
    Returns the node holding key, or None.
    Iterative, no recursion.
    """
    while node is not None:
        if key < node.key:
            node = node.left
        elif key > node.key:
            node = node.right
        else:
            return node
    return None


def find_min(node: Optional[Node[K, V]]) -> Optional[Node[K, V]]:
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def find_max(node: Optional[Node[K, V]]) -> Optional[Node[K, V]]:
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


def delete_min(node: Optional[Node[K, V]]) -> Optional[Node[K, V]]:
    """
    Detaches the minimum node of the subtree; its right child takes its place.
    Sizes are recomputed along the left spine.
    """
    if node is None:
        return None
    if node.left is None:
        return node.right
    node.left = delete_min(node.left)
    _resize(node)
    return node


def delete(node: Optional[Node[K, V]], key: K) -> Optional[Node[K, V]]:
    """
    Hibbard deletion of key below node, no rebalancing.
    A node with two children is replaced by its in-order successor.
    Returns the new subtree root; an absent key leaves the subtree unchanged.
    """
    if node is None:
        return None

    if key < node.key:
        node.left = delete(node.left, key)
    elif key > node.key:
        node.right = delete(node.right, key)
    else:
        if node.right is None:
            return node.left
        if node.left is None:
            return node.right
        doomed = node
        successor = find_min(doomed.right)
        assert successor is not None
        successor.right = delete_min(doomed.right)
        successor.left = doomed.left
        node = successor

    _resize(node)
    return node


def inorder(node: Optional[Node[K, V]], visit: Callable[[Node[K, V]], None]) -> None:
    """Calls visit on every node in ascending key order (left, self, right)."""
    for current in iter_nodes(node):
        visit(current)


def left_path_height(node: Optional[Node[K, V]]) -> int:
    """Number of nodes on the chain of left links starting at node."""
    depth = 0
    while node is not None:
        depth += 1
        node = node.left
    return depth


def right_path_height(node: Optional[Node[K, V]]) -> int:
    """Number of nodes on the chain of right links starting at node."""
    depth = 0
    while node is not None:
        depth += 1
        node = node.right
    return depth


def height(node: Optional[Node[K, V]]) -> int:
    """
    Returns the true height (nodes on the longest root-to-leaf path).
    Time Complexity: O(n) since every node is visited
    """
    if node is None:
        return 0
    return 1 + max(height(node.left), height(node.right))


def iter_nodes(node: Optional[Node[K, V]]) -> Iterator[Node[K, V]]:
    """
    Lazily yields nodes in ascending key order.
    Uses an explicit stack so callers may stop early.
    """
    stack: list[Node[K, V]] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right
