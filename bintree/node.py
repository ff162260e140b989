"""Binary tree nodes with parent links."""

from __future__ import annotations

from typing import Optional


class Node:
    """A binary tree node holding an integer and links to parent and children."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        node = Node(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        node = Node(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def delete(self) -> None:
        """Dismantle the subtree rooted here and detach it from its parent."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            for child in (node.left, node.right):
                if child is not None:
                    stack.append(child)
            node.left = None
            node.right = None
            node.parent = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, or None."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        grandparent = parent.parent
        if grandparent.left is parent:
            return grandparent.right
        return grandparent.left