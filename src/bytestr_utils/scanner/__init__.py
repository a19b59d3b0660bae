# src/bytestr_utils/scanner/__init__.py
"""
scanner
=======

Does: Expose the token-scanning primitive shared by split and replace.
Exports: as_view, require_token, find, find_all, count
"""

from .scan_core import (
    as_view,
    count,
    find,
    find_all,
    require_token,
)

__all__ = [
    "as_view",
    "require_token",
    "find",
    "find_all",
    "count",
]
