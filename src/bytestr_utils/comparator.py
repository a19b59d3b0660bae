# src/bytestr_utils/comparator.py
"""
comparator.py.

Does: Byte-for-byte prefix/suffix tests via a bounded forward/backward walk.
      Not Unicode aware; no normalization, no allocation.
Returns: starts_with(), ends_with() → bool.
"""

from __future__ import annotations

from bytestr_utils.scanner import as_view
from bytestr_utils.types import BytesLike

__all__ = ["starts_with", "ends_with"]


def _comparable(view: memoryview, probe: memoryview) -> bool:
    # Empty subject, empty probe, or probe longer than subject never match
    return bool(view) and bool(probe) and len(probe) <= len(view)


def starts_with(sv: BytesLike, test: BytesLike) -> bool:
    """
    Does: Walk len(test) bytes from the start of `sv`, comparing each.
    Returns: True only if every compared byte matches; False for an empty `test`.
    """
    view, probe = as_view(sv), as_view(test)
    if not _comparable(view, probe):
        return False
    for i in range(len(probe)):
        if view[i] != probe[i]:
            return False
    return True


def ends_with(sv: BytesLike, test: BytesLike) -> bool:
    """
    Does: Walk len(test) bytes backwards from the end of `sv`, comparing each.
    Returns: True only if every compared byte matches; False for an empty `test`.
    """
    view, probe = as_view(sv), as_view(test)
    if not _comparable(view, probe):
        return False
    offset = len(view) - len(probe)
    for i in reversed(range(len(probe))):
        if view[offset + i] != probe[i]:
            return False
    return True
