"""Console menus over an AVL user registry and a red-black product inventory."""

__version__ = "0.1.0"
__all__ = ["console", "avl", "redblack"]