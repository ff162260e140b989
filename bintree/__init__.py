"""Binary trees of integers: nodes, traversals, measurements and rendering."""

__version__ = "0.1.0"
__all__ = ["node", "render", "traversal", "measure"]