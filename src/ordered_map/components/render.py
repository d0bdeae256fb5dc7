"""Text rendering of the tree shape, for debugging and the demo driver."""

from __future__ import annotations

from typing import Optional

from ..core.types import K, V
from .llrb import is_red
from .node import Node

RED_MARK = "*"


def _label(node: Node[K, V]) -> str:
    return f"{node.key}{RED_MARK if is_red(node) else ''}"


def pretty_print(root: Optional[Node[K, V]]) -> str:
    """
    Draws the tree top-down with / and \\ links.
    Red nodes carry a trailing '*'.
    """
    if root is None:
        return "<empty>"

    def _display(node: Node[K, V]) -> tuple[list[str], int, int, int]:
        # returns (lines, width, height, column of the node label's middle)
        line = _label(node)
        width = len(line)

        if node.left is None and node.right is None:
            return [line], width, 1, width // 2

        if node.right is None:
            assert node.left is not None
            lines, n, p, x = _display(node.left)
            first = (x + 1) * " " + (n - x - 1) * "_" + line
            second = x * " " + "/" + (n - x - 1 + width) * " "
            shifted = [l + width * " " for l in lines]
            return [first, second] + shifted, n + width, p + 2, n + width // 2

        if node.left is None:
            lines, n, p, x = _display(node.right)
            first = line + x * "_" + (n - x) * " "
            second = (width + x) * " " + "\\" + (n - x - 1) * " "
            shifted = [width * " " + l for l in lines]
            return [first, second] + shifted, n + width, p + 2, width // 2

        left, n, p, x = _display(node.left)
        right, m, q, y = _display(node.right)
        first = (x + 1) * " " + (n - x - 1) * "_" + line + y * "_" + (m - y) * " "
        second = x * " " + "/" + (n - x - 1 + width + y) * " " + "\\" + (m - y - 1) * " "
        if p < q:
            left += [n * " "] * (q - p)
        elif q < p:
            right += [m * " "] * (p - q)
        body = [a + width * " " + b for a, b in zip(left, right)]
        return [first, second] + body, n + width + m, max(p, q) + 2, n + width // 2

    lines, _, _, _ = _display(root)
    return "\n".join(line.rstrip() for line in lines)
