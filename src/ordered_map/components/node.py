"""Tree node for the ordered map."""

from __future__ import annotations

from typing import Generic, Optional

from ..core.types import RED, Color, K, V


class Node(Generic[K, V]):
    """A node in the tree, owning its two children.

    size counts the node itself plus every node in both subtrees.
    """

    __slots__ = ("key", "value", "left", "right", "size", "color")

    def __init__(self, key: K, value: V, color: Color = RED, size: int = 1) -> None:
        self.key: K = key
        self.value: V = value
        self.left: Optional[Node[K, V]] = None
        self.right: Optional[Node[K, V]] = None
        self.size = size
        self.color = color

    def __repr__(self) -> str:
        color = "red" if self.color == RED else "black"
        return f"Node({self.key!r}, {self.value!r}, {color}, size={self.size})"
