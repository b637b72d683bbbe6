"""Solutions to classic algorithm problems, with linked-list, binary-tree and parsing helpers."""

__version__ = "0.1.0"