"""Linked lists, hash tables, word-frequency counting, an in-memory warehouse store and small console programs."""

__version__ = "0.1.0"