"""Depth-first traversals of binary trees, yielding node values."""

from __future__ import annotations

from typing import Iterator, List, Optional

from bintree.node import Node


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in pre-order: node, left subtree, right subtree."""
    stack: List[Node] = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in in-order: left subtree, node, right subtree."""
    stack: List[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in post-order: left subtree, right subtree, node."""
    stack: List[Node] = []
    node = tree
    last: Optional[Node] = None
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        top = stack[-1]
        if top.right is not None and top.right is not last:
            node = top.right
        else:
            yield top.value
            last = stack.pop()