"""Text drawing of binary trees."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from bintree.node import Node


class _Canvas:
    """Rows of characters that grow on demand."""

    def __init__(self, rows: int) -> None:
        self.rows: List[List[str]] = [[] for _ in range(rows)]

    def put(self, row: int, col: int, char: str) -> None:
        if col < 0:
            return
        line = self.rows[row]
        if col >= len(line):
            line.extend(" " * (col + 1 - len(line)))
        line[col] = char

    def lines(self) -> List[str]:
        result = []
        for line in self.rows:
            text = "".join(line)
            keep = max(len(text.rstrip(" ")), 2)
            result.append(text[:keep].ljust(keep))
        return result


def _height(tree: Node) -> int:
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _draw(tree: Optional[Node], offset: int, depth: int, canvas: _Canvas) -> int:
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _draw(tree.left, offset, depth + 1, canvas)
    right = _draw(tree.right, offset + left + width, depth + 1, canvas)
    for i, char in enumerate(label):
        canvas.put(depth, offset + left + i, char)
    if depth:
        if is_left:
            start, length = offset + left + width // 2, width + right
        else:
            start, length = offset - width // 2, left + width
        for col in range(start, start + length):
            canvas.put(depth - 1, col, "-")
        canvas.put(depth - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of a tree, one line per level, each ending in a newline."""
    if tree is None:
        return ""
    canvas = _Canvas(_height(tree) + 1)
    _draw(tree, 0, 0, canvas)
    return "".join(line + "\n" for line in canvas.lines())


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of a tree to a stream, standard output by default."""
    stream = sys.stdout if file is None else file
    stream.write(render(tree))