"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from bintree.node import Node


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack: List[Node] = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _level_count(tree: Optional[Node]) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for no tree."""
    if tree is None:
        return 0
    counts: Dict[Node, int] = {}
    for node in reversed(list(_nodes(tree))):
        counts[node] = 1 + max(counts.get(node.left, 0), counts.get(node.right, 0))
    return counts[tree]


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for no tree or a leaf."""
    if tree is None:
        return 0
    return _level_count(tree) - 1


def depth(tree: Optional[Node]) -> int:
    """Return the number of edges from the node up to its root; 0 for no node."""
    level = 0
    if tree is None:
        return level
    node = tree
    while node.parent is not None:
        level += 1
        node = node.parent
    return level


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's level count minus the right one's; 0 for no tree."""
    if tree is None:
        return 0
    return _level_count(tree.left) - _level_count(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either no children or two."""
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node in _nodes(tree)
    )


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all its leaves lie on the same level."""
    if tree is None:
        return False
    levels = _level_count(tree)
    stack: List[Tuple[Node, int]] = [(tree, levels)]
    while stack:
        node, remaining = stack.pop()
        if node.is_leaf():
            if remaining != 1:
                return False
            continue
        if node.left is None or node.right is None:
            return False
        stack.append((node.left, remaining - 1))
        stack.append((node.right, remaining - 1))
    return True