# src/bytestr_utils/splitter/split_core.py

"""
split_core.py.

Does: Token splitting under two empty-part policies (keep / ignore), plus
      first-occurrence splitting. View variants alias the input buffer;
      copy variants return independent bytes.
Returns: Lists of memoryview / bytes, or 2-tuples for split_first*.
Used by: Callers parsing delimited byte records (CSV-ish rows, key=value).
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from bytestr_utils.scanner import as_view, find, find_all, require_token
from bytestr_utils.types import BytesLike

__all__ = [
    "split",
    "split_copy",
    "split_first",
    "split_first_copy",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

T = TypeVar("T")

# ─────────────────────────────────────────────────────────────────────────────
# Policies (shared by view and copy variants through `make`)
# ─────────────────────────────────────────────────────────────────────────────


def _view(part: memoryview) -> memoryview:
    return part


def _copy(part: memoryview) -> bytes:
    return part.tobytes()


def _split_keep_empty(
    sv: BytesLike, token: BytesLike, make: Callable[[memoryview], T]
) -> list[T]:
    """
    Does: Emit every slice between occurrences, zero-length ones included,
          then the tail (always, even if empty).
    Returns: k+1 parts for k occurrences, in document order.
    """
    view = as_view(sv)
    step = len(as_view(token))
    parts: list[T] = []
    start = 0
    for i in find_all(sv, token):
        parts.append(make(view[start:i]))
        start = i + step
    parts.append(make(view[start:]))
    return parts


def _split_ignore_empty(
    sv: BytesLike, token: BytesLike, make: Callable[[memoryview], T]
) -> list[T]:
    """
    Does: Same scan as _split_keep_empty but drop zero-length parts,
          including an empty tail.
    Returns: Only non-empty parts, in document order.
    """
    view = as_view(sv)
    step = len(as_view(token))
    parts: list[T] = []
    start = 0
    for i in find_all(sv, token):
        if i - start > 0:
            parts.append(make(view[start:i]))
        start = i + step
    if len(view) - start > 0:
        parts.append(make(view[start:]))
    return parts


def _split(
    sv: BytesLike, token: BytesLike, keep_empty_parts: bool, make: Callable[[memoryview], T]
) -> list[T]:
    require_token(token)
    if keep_empty_parts:
        parts = _split_keep_empty(sv, token, make)
    else:
        parts = _split_ignore_empty(sv, token, make)
    log.debug("split: %d part(s) (keep_empty_parts=%s)", len(parts), keep_empty_parts)
    return parts


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────


def split(
    sv: BytesLike, token: BytesLike, keep_empty_parts: bool = True
) -> list[memoryview]:
    """
    Does: Split `sv` on every non-overlapping `token`, left to right.
    Returns: memoryviews into `sv`; they stay valid only while `sv` does.
    Raises: EmptyTokenError if `token` is empty.
    """
    return _split(sv, token, keep_empty_parts, _view)


def split_copy(sv: BytesLike, token: BytesLike, keep_empty_parts: bool = True) -> list[bytes]:
    """Like split(), but each part is an independent bytes copy."""
    return _split(sv, token, keep_empty_parts, _copy)


def split_first(sv: BytesLike, token: BytesLike) -> tuple[memoryview, memoryview]:
    """
    Does: Cut `sv` around the first occurrence of `token` only.
    Returns: (before, after) views; (whole, empty) when `token` is absent.
    Raises: EmptyTokenError if `token` is empty.
    """
    view = as_view(sv)
    i = find(sv, token)
    if i == -1:
        return view, view[len(view) :]
    return view[:i], view[i + len(as_view(token)) :]


def split_first_copy(sv: BytesLike, token: BytesLike) -> tuple[bytes, bytes]:
    """Like split_first(), but both halves are independent bytes copies."""
    head, tail = split_first(sv, token)
    return head.tobytes(), tail.tobytes()
