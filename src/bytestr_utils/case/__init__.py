# src/bytestr_utils/case/__init__.py
"""
case.
=====

Does: Provide single-byte case mapping (in place and copying) over explicit tables.
Exports: transform, to_upper, to_lower, as_upper, as_lower,
         CaseTable, ASCII, get_case_table, UnknownCaseTable
"""

from __future__ import annotations

from .case_map import (
    as_lower,
    as_upper,
    to_lower,
    to_upper,
    transform,
)
from .case_tables import (
    ASCII,
    CaseTable,
    UnknownCaseTable,
    get_case_table,
)

__all__ = [
    # mapping
    "transform",
    "to_upper",
    "to_lower",
    "as_upper",
    "as_lower",
    # tables
    "CaseTable",
    "ASCII",
    "get_case_table",
    "UnknownCaseTable",
]
