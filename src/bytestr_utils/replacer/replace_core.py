# src/bytestr_utils/replacer/replace_core.py

"""
replace_core.py.

Does: Multi-occurrence search-and-replace in two passes:
      (1) pre-scan every non-overlapping match offset,
      (2) allocate the output once at its exact final size and fill it
          left to right, never growing or reallocating it.
Returns: A new bytearray that never aliases the input.
Used by: Callers rewriting delimiters/markers inside byte records.
"""
from __future__ import annotations

import logging

from bytestr_utils.scanner import as_view, find_all, require_token
from bytestr_utils.types import BytesLike

__all__ = ["replace", "replaced_size"]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)


def replaced_size(subject_len: int, matches: int, search_len: int, replace_len: int) -> int:
    """
    Does: Closed-form output length once `matches` spans of `search_len`
          bytes are swapped for `replace_len` bytes each.
    Returns: subject_len - matches*search_len + matches*replace_len.
    """
    return subject_len - matches * search_len + matches * replace_len


def replace(
    sv: BytesLike,
    search_token: BytesLike,
    replace_token: BytesLike,
    *,
    debug: bool = False,
) -> bytearray:
    """
    Does: Replace every non-overlapping `search_token` in `sv` with
          `replace_token`, scanning left to right.
    Returns: Exact-size bytearray (an owned copy of `sv` when nothing matched).
    Raises: EmptyTokenError if `search_token` is empty. `replace_token`
            may be empty (matches are deleted).
    """

    def d(*args):
        if debug:
            log.debug(" ".join(str(a) for a in args))

    require_token(search_token, name="search_token")
    view = as_view(sv)
    repl = as_view(replace_token)
    search_len = len(as_view(search_token))

    # 1) Pre-scan
    positions = list(find_all(sv, search_token))
    d(f"PRESCAN matches={len(positions)} positions={positions[:16]}")

    # 2) Fast path
    if not positions:
        d("FASTPATH no match, copying input")
        return bytearray(view)

    # 3) Exact sizing
    n = len(positions)
    size = replaced_size(len(view), n, search_len, len(repl))
    d(f"SIZE in={len(view)} out={size} n={n} search={search_len} repl={len(repl)}")
    out = bytearray(size)

    # 4) Single pass; every slice assignment below has equal lengths on both
    #    sides, so `out` is never resized.
    w = 0
    src = 0
    for p in positions:
        span = p - src
        out[w : w + span] = view[src:p]
        w += span
        out[w : w + len(repl)] = repl
        w += len(repl)
        src = p + search_len
    tail = len(view) - src
    if w + tail != size:
        raise AssertionError(f"replace sizing mismatch: wrote {w + tail}, allocated {size}")
    out[w:] = view[src:]

    return out
