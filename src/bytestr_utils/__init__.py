"""
bytestr_utils
=============

Does: Byte-oriented string primitives for single-byte encodings: case folding,
      prefix/suffix tests, token splitting, first-token splitting,
      fixed-width chunking and multi-occurrence replace.
Returns: View variants hand back memoryviews into the caller's buffer;
         copy variants and replace() return newly allocated bytes/bytearray.
"""

from __future__ import annotations

from .case import (
    ASCII,
    CaseTable,
    UnknownCaseTable,
    as_lower,
    as_upper,
    get_case_table,
    to_lower,
    to_upper,
    transform,
)
from .chunker import chunk, iter_chunks
from .comparator import ends_with, starts_with
from .errors import EmptyTokenError, InvalidArgumentError
from .replacer import replace, replaced_size
from .scanner import count, find, find_all
from .splitter import split, split_copy, split_first, split_first_copy

__all__ = [
    # comparator
    "starts_with",
    "ends_with",
    # splitter
    "split",
    "split_copy",
    "split_first",
    "split_first_copy",
    # replacer
    "replace",
    "replaced_size",
    # chunker
    "chunk",
    "iter_chunks",
    # case
    "to_upper",
    "to_lower",
    "as_upper",
    "as_lower",
    "transform",
    "CaseTable",
    "ASCII",
    "get_case_table",
    "UnknownCaseTable",
    # scanner
    "find",
    "find_all",
    "count",
    # errors
    "InvalidArgumentError",
    "EmptyTokenError",
]
__docformat__ = "google"
