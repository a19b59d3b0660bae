# src/bytestr_utils/scanner/scan_core.py

"""
scan_core.py.

Does: Locate non-overlapping occurrences of a token in a byte buffer,
      left to right, and normalize inputs into 1-D byte views.
Returns: Offsets (int), iterators of offsets, or memoryviews.
Used by: split, replace and compare; chunk uses as_view only.
"""
from __future__ import annotations

from collections.abc import Iterator

from bytestr_utils.errors import EmptyTokenError
from bytestr_utils.types import BytesLike

__all__ = [
    "as_view",
    "require_token",
    "find",
    "find_all",
    "count",
]

# ─────────────────────────────────────────────────────────────────────────────
# Input normalization
# ─────────────────────────────────────────────────────────────────────────────


def as_view(data: BytesLike) -> memoryview:
    """
    Does: Wrap `data` in a 1-D unsigned-byte memoryview without copying.
    Returns: memoryview aliasing the caller's buffer. A strided 1-D byte
             view (e.g. mv[::2]) is passed through as-is.
    Raises: TypeError for str (callers must pick an encoding themselves),
            or when a non-byte or multi-dimensional buffer is not
            C-contiguous and so cannot be cast.
    """
    if isinstance(data, str):
        raise TypeError("expected a bytes-like object, got str (encode it first)")
    view = data if isinstance(data, memoryview) else memoryview(data)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def _haystack(data: BytesLike) -> bytes | bytearray:
    # bytes/bytearray expose .find directly; other buffers get a search copy
    if isinstance(data, (bytes, bytearray)):
        return data
    return as_view(data).tobytes()


def require_token(token: BytesLike, name: str = "token") -> None:
    """Raise EmptyTokenError when `token` has zero length."""
    if len(as_view(token)) == 0:
        raise EmptyTokenError(f"{name} must not be empty")


# ─────────────────────────────────────────────────────────────────────────────
# Scanning
# ─────────────────────────────────────────────────────────────────────────────


def find(sv: BytesLike, token: BytesLike, start: int = 0) -> int:
    """
    Does: Find the first occurrence of `token` at or after `start`.
    Returns: Byte offset, or -1 when absent.
    """
    require_token(token)
    return _haystack(sv).find(token, start)


def find_all(sv: BytesLike, token: BytesLike) -> Iterator[int]:
    """
    Does: Yield start offsets of every non-overlapping occurrence of `token`,
          left to right. After a match the cursor jumps past the whole token,
          so b"aaa" contains one b"aa", not two.
    Returns: Iterator of strictly increasing offsets.
    Used by: split (cut points) and replace (pre-scan).
    """
    require_token(token)
    hay = _haystack(sv)
    step = len(as_view(token))
    pos = hay.find(token)
    while pos != -1:
        yield pos
        pos = hay.find(token, pos + step)


def count(sv: BytesLike, token: BytesLike) -> int:
    """Count non-overlapping occurrences of `token` in `sv`."""
    return sum(1 for _ in find_all(sv, token))
