# src/bytestr_utils/types.py
"""
types.py.

Does: Define lightweight aliases and structural Protocols used for type hints
across the byte-string primitives.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, Union

BytesLike = Union[bytes, bytearray, memoryview]
ByteMap = Callable[[int], int]


class ByteClassifier(Protocol):
    def upper(self, b: int) -> int: ...

    def lower(self, b: int) -> int: ...


__all__ = ["BytesLike", "ByteMap", "ByteClassifier"]

__docformat__ = "google"
