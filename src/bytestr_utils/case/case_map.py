# src/bytestr_utils/case/case_map.py
"""
case_map.

Does: Case folding for single-byte encodings, in place (to_upper/to_lower)
      or into a new owned copy (as_upper/as_lower). Bytes outside the
      table's letter ranges are left as-is.
Returns: None for in-place mutators; bytes for copy variants.
"""

from __future__ import annotations

from bytestr_utils.case.case_tables import ASCII, CaseTable
from bytestr_utils.scanner import as_view
from bytestr_utils.types import ByteClassifier, ByteMap, BytesLike

__all__ = [
    "transform",
    "to_upper",
    "to_lower",
    "as_upper",
    "as_lower",
]


def transform(buf: BytesLike, func: ByteMap) -> None:
    """
    Does: Apply `func` (byte value → byte value) to every byte of `buf` in place.
    Raises: TypeError if `buf` is read-only (e.g. bytes).
    """
    view = as_view(buf)
    if view.readonly:
        raise TypeError(f"in-place mapping needs a writable buffer, got {type(buf).__name__}")
    for i in range(len(view)):
        view[i] = func(view[i])


def to_upper(buf: BytesLike, table: ByteClassifier | None = None) -> None:
    transform(buf, (table or ASCII).upper)


def to_lower(buf: BytesLike, table: ByteClassifier | None = None) -> None:
    transform(buf, (table or ASCII).lower)


def _source(sv: BytesLike) -> bytes | bytearray:
    if isinstance(sv, (bytes, bytearray)):
        return sv
    return as_view(sv).tobytes()


def _translation(table: ByteClassifier, direction: str) -> bytes:
    # CaseTable carries its 256-byte tables; any other classifier is sampled
    if isinstance(table, CaseTable):
        return getattr(table, f"{direction}_table")
    func = getattr(table, direction)
    return bytes(func(b) for b in range(256))


def as_upper(sv: BytesLike, table: ByteClassifier | None = None) -> bytes:
    """Does: Return an uppercased bytes copy of `sv`; `sv` is not touched."""
    return bytes(_source(sv).translate(_translation(table or ASCII, "upper")))


def as_lower(sv: BytesLike, table: ByteClassifier | None = None) -> bytes:
    """Does: Return a lowercased bytes copy of `sv`; `sv` is not touched."""
    return bytes(_source(sv).translate(_translation(table or ASCII, "lower")))
