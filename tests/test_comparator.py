# tests/test_comparator.py
from __future__ import annotations

import pytest

from bytestr_utils import comparator as C


@pytest.mark.parametrize(
    "sv,test,expected",
    [
        (b"hello world", b"hello", True),
        (b"hello world", b"world", False),
        (b"hello", b"hello", True),
        (b"hell", b"hello", False),   # test longer than subject
        (b"", b"x", False),
        (b"abc", b"", False),          # empty test never matches
        (b"", b"", False),
        (b"\xffabc", b"\xff", True),   # raw bytes, no decoding
    ],
)
def test_starts_with(sv, test, expected):
    assert C.starts_with(sv, test) is expected


@pytest.mark.parametrize(
    "sv,test,expected",
    [
        (b"alpha.py", b".py", True),
        (b"alpha.py", b"alpha", False),
        (b"abc", b"abc", True),
        (b"bc", b"abc", False),
        (b"", b"x", False),
        (b"abc", b"", False),
        (b"xbc", b"abc", False),       # mismatch only at the first compared byte
    ],
)
def test_ends_with(sv, test, expected):
    assert C.ends_with(sv, test) is expected


@pytest.mark.parametrize("s", [b"a", b"ab", b"a,b,,c", bytes(range(256))])
def test_subject_starts_and_ends_with_itself(s):
    assert C.starts_with(s, s)
    assert C.ends_with(s, s)


def test_mixed_buffer_types():
    assert C.starts_with(bytearray(b"prefix-body"), memoryview(b"prefix"))
    assert C.ends_with(memoryview(b"prefix-body")[7:], b"body")


def test_is_case_sensitive():
    assert not C.starts_with(b"Hello", b"hello")
