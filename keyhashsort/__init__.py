"""Chained hash map and radix sort over files of six-digit integer keys."""

__version__ = "0.1.0"
__all__ = ["pairs", "hashmap", "radix", "keyfile", "cli"]