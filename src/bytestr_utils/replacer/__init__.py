# src/bytestr_utils/replacer/__init__.py
"""
replacer
========

Does: Expose exact-size, single-pass search-and-replace.
Exports: replace, replaced_size
"""

from .replace_core import (
    replace,
    replaced_size,
)

__all__ = [
    "replace",
    "replaced_size",
]
