# bintree

A small library for building and inspecting binary trees of integers. Every
node keeps a link to its parent as well as to its two children.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
root.left = Node(12, root)
root.right = Node(402, root)
root.left.insert_right(54)
root.insert_right(128)     # 402 becomes the right child of 128
```

`Node(value, parent=None)` creates a node that points to its parent. It does
not attach itself to that parent: set `parent.left` or `parent.right`
yourself, as above.

`insert_left(value)` and `insert_right(value)` create a new child on that side
and return it. If the side was already taken, the old child moves one level
down and becomes the new node's child on the same side.

Other node operations:

- `is_leaf()`: the node has no children.
- `is_root()`: the node has no parent.
- `sibling()`: the other child of the node's parent, or `None`.
- `uncle()`: the sibling of the node's parent, or `None`.
- `delete()`: removes the node from its parent and clears every parent and
  child link in the subtree below it.

Node attributes are `value`, `parent`, `left` and `right`.

## Traversals

`bintree.traversal` provides `preorder(tree)`, `inorder(tree)` and
`postorder(tree)`. Each is a generator yielding the node values in that order;
passing `None` yields nothing.

```python
from bintree.traversal import inorder

print(list(inorder(root)))   # [12, 54, 98, 128, 402]
```

## Measurements

`bintree.measure` provides:

| Function               | Result                                                        |
|------------------------|---------------------------------------------------------------|
| `height(tree)`         | edges on the longest path down from the node (0 for a leaf)   |
| `depth(tree)`          | edges from the node up to its root                            |
| `size(tree)`           | number of nodes                                               |
| `leaves(tree)`         | number of nodes without children                              |
| `internal_nodes(tree)` | number of nodes with at least one child                       |
| `balance(tree)`        | levels in the left subtree minus levels in the right subtree  |
| `is_full(tree)`        | every node has either no children or two                      |
| `is_perfect(tree)`     | full, with all leaves on the same level                       |

Every function accepts `None` for an empty tree: the counting functions
return `0`, and `is_full` and `is_perfect` return `False`.

## Rendering

`bintree.render.render(tree)` returns an ASCII drawing of the tree, one line
per level, each line ending in a newline (an empty string for `None`). Values
are shown zero-padded to three digits. `print_tree(tree, file=None)` writes the
drawing to `file`, or to standard output when no stream is given.

```python
from bintree.node import Node
from bintree.render import print_tree

root = Node(98)
root.left = Node(12, root)
root.left.left = Node(6, root.left)
root.left.right = Node(16, root.left)
root.right = Node(402, root)
root.right.left = Node(256, root.right)
root.right.right = Node(512, root.right)

print_tree(root)
```

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

## What it does not do

bintree is a library only: it has no command-line program. Trees are shaped
by hand; there is no ordered (search-tree) insertion, lookup or rebalancing.