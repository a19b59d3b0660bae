# src/bytestr_utils/chunker.py
"""
chunker.py.

Does: Fixed-width slicing of a byte buffer, optionally discarding `skip`
      bytes after each chunk.
      E.g.: chunk(b"abcdef123", 3)      -> b"abc", b"def", b"123"
            chunk(b"abc,def,123", 3, 1) -> b"abc", b"def", b"123"
Returns: memoryviews into the input (eager list or lazy iterator).
"""

from __future__ import annotations

from collections.abc import Iterator

from bytestr_utils.errors import InvalidArgumentError
from bytestr_utils.scanner import as_view
from bytestr_utils.types import BytesLike

__all__ = ["chunk", "iter_chunks"]


def _chunks(view: memoryview, character_count: int, stride: int) -> Iterator[memoryview]:
    i = 0
    while i < len(view):
        yield view[i : i + character_count]
        i += stride


def iter_chunks(sv: BytesLike, character_count: int, skip: int = 0) -> Iterator[memoryview]:
    """
    Does: Lazily yield slices of up to `character_count` bytes, advancing the
          cursor by character_count + skip. The last chunk may be shorter.
    Returns: An empty iterator for character_count == 0.
    Raises: InvalidArgumentError for negative character_count or skip
            (checked at call time, not on first next()).
    """
    if character_count < 0 or skip < 0:
        raise InvalidArgumentError(
            f"character_count and skip must be >= 0 (got {character_count}, {skip})"
        )
    if character_count == 0:
        return iter(())
    return _chunks(as_view(sv), character_count, character_count + skip)


def chunk(sv: BytesLike, character_count: int, skip: int = 0) -> list[memoryview]:
    """Eager form of iter_chunks()."""
    return list(iter_chunks(sv, character_count, skip))
