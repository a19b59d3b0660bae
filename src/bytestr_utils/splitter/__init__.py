# src/bytestr_utils/splitter/__init__.py
"""
splitter
========

Does: Expose token splitting (keep/ignore empty parts) and first-token splitting.
Exports: split, split_copy, split_first, split_first_copy
"""

from .split_core import (
    split,
    split_copy,
    split_first,
    split_first_copy,
)

__all__ = [
    "split",
    "split_copy",
    "split_first",
    "split_first_copy",
]
