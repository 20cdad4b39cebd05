"""A red-black tree of ordered items and a list-distance puzzle solver."""

__version__ = "0.1.0"
__all__ = ["items", "rbtree", "task1"]