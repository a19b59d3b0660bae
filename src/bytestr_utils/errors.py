# src/bytestr_utils/errors.py
"""
errors.py.

Does: Define the argument errors raised by the scanning, splitting and
      replacing primitives.
Used by: scanner, splitter, replacer, chunker.
"""

from __future__ import annotations

__all__ = ["InvalidArgumentError", "EmptyTokenError"]


class InvalidArgumentError(ValueError):
    """Raise when an argument is outside the domain an operation accepts."""


class EmptyTokenError(InvalidArgumentError):
    """Raise when a search token is empty (every offset would match)."""
