# src/bytestr_utils/case/case_tables.py
# ──────────────────────────────────────────────────────────────
# Single-byte case classifiers
# ──────────────────────────────────────────────────────────────
"""
case_tables.

Does: Provide explicit, stateless uppercase/lowercase tables for single-byte
      encodings. ASCII is fixed in code; further tables (e.g. latin1) come
      from <data>/case_tables.json. No process-wide locale is consulted.
Returns: CaseTable instances, ASCII, get_case_table().
Used by: case_map (to_upper/to_lower/as_upper/as_lower).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from bytestr_utils.utils import debug, load_config

__all__ = [
    "CaseTable",
    "ASCII",
    "CASE_TABLES_FILE",
    "UnknownCaseTable",
    "get_case_table",
]

CASE_TABLES_FILE = "case_tables"

# (lower_start, lower_end inclusive, upper_start)
Range = tuple[int, int, int]


class UnknownCaseTable(KeyError):
    """Raise when a case table name is not defined in the config."""


# ──────────────────────────────────────────────────────────────
# 1) TABLE TYPE
# ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CaseTable:
    name: str
    upper_table: bytes
    lower_table: bytes

    def upper(self, b: int) -> int:
        return self.upper_table[b]

    def lower(self, b: int) -> int:
        return self.lower_table[b]

    @classmethod
    def from_ranges(cls, name: str, ranges: Iterable[Range]) -> CaseTable:
        """
        Does: Build both 256-entry tables from lowercase→uppercase ranges.
              Bytes outside every range map to themselves.
        Returns: CaseTable.
        """
        upper = bytearray(range(256))
        lower = bytearray(range(256))
        for lo_start, lo_end, up_start in ranges:
            for b in range(lo_start, lo_end + 1):
                up = up_start + (b - lo_start)
                upper[b] = up
                lower[up] = b
        return cls(name, bytes(upper), bytes(lower))


ASCII = CaseTable.from_ranges("ascii", [(0x61, 0x7A, 0x41)])


# ──────────────────────────────────────────────────────────────
# 2) CONFIG-BACKED TABLES
# ──────────────────────────────────────────────────────────────


def _check_range(name: str, r: Any) -> Range:
    if not (isinstance(r, list) and len(r) == 3 and all(isinstance(x, int) for x in r)):
        raise ValueError(f"{name}: each range must be [lower_start, lower_end, upper_start], got {r!r}")
    lo_start, lo_end, up_start = r
    if not (0 <= lo_start <= lo_end <= 0xFF and 0 <= up_start <= 0xFF - (lo_end - lo_start)):
        raise ValueError(f"{name}: range {r!r} leaves the 0..255 byte domain")
    return lo_start, lo_end, up_start


def _validate_tables(data: dict[str, Any]) -> dict[str, Any]:
    """
    Does: Check the {name: {"ranges": [[lo, hi, up], ...]}} shape and
          normalize each range to a tuple.
    Returns: {name: tuple[Range, ...]}.
    """
    out: dict[str, Any] = {}
    for name, spec in data.items():
        if not isinstance(spec, dict) or not isinstance(spec.get("ranges"), list):
            raise ValueError(f"{name}: expected an object with a 'ranges' list")
        out[name.lower()] = tuple(_check_range(name, r) for r in spec["ranges"])
    return out


def get_case_table(name: str = "ascii") -> CaseTable:
    """
    Does: Return the named case table. "ascii" is served from code without
          touching the filesystem; other names are read from case_tables.json.
    Returns: CaseTable.
    Raises: UnknownCaseTable if the config has no such entry; config errors
            (ConfigFileNotFound, ConfigParseError...) propagate.
    """
    key = name.lower().strip()
    if key == ASCII.name:
        return ASCII
    tables = load_config(CASE_TABLES_FILE, mode="validated_dict", validator=_validate_tables)
    if key not in tables:
        raise UnknownCaseTable(name)
    debug(f"loaded case table {key!r} ({len(tables[key])} range(s))", topic="case")
    return CaseTable.from_ranges(key, tables[key])
