# tests/test_case.py
from __future__ import annotations

import json

import pytest

from bytestr_utils.case import case_map as M
from bytestr_utils.case import case_tables as T
from bytestr_utils.utils import ConfigParseError, clear_config_cache

# ──────────────────────────────────────────────────────────────────────────────
# Fixtures
# ──────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Use the bundled data/ dir unless a test points BYTESTR_UTILS_DATA_DIR elsewhere."""
    monkeypatch.delenv("BYTESTR_UTILS_DATA_DIR", raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


# ──────────────────────────────────────────────────────────────────────────────
# Copy variants
# ──────────────────────────────────────────────────────────────────────────────


def test_as_upper_leaves_original_unchanged():
    src = bytearray(b"MiXeD")
    assert M.as_upper(src) == b"MIXED"
    assert src == b"MiXeD"


def test_as_lower():
    assert M.as_lower(b"MiXeD 123!") == b"mixed 123!"


def test_ascii_table_ignores_high_bytes():
    assert M.as_upper(b"caf\xe9") == b"CAF\xe9"


def test_as_upper_accepts_memoryview_and_returns_bytes():
    out = M.as_upper(memoryview(b"xxabxx")[2:4])
    assert out == b"AB" and type(out) is bytes


# ──────────────────────────────────────────────────────────────────────────────
# In-place variants and the generic transform
# ──────────────────────────────────────────────────────────────────────────────


def test_to_upper_and_to_lower_mutate_in_place():
    buf = bytearray(b"Hello, World")
    M.to_upper(buf)
    assert buf == b"HELLO, WORLD"
    M.to_lower(buf)
    assert buf == b"hello, world"


def test_in_place_rejects_read_only_buffers():
    with pytest.raises(TypeError):
        M.to_upper(b"immutable")


def test_transform_applies_arbitrary_byte_map():
    buf = bytearray(b"abc")
    M.transform(buf, lambda b: b + 1)
    assert buf == b"bcd"


class _Rot1:
    """Classifier that only satisfies the ByteClassifier protocol."""

    def upper(self, b: int) -> int:
        return (b + 1) % 256

    def lower(self, b: int) -> int:
        return (b - 1) % 256


def test_protocol_only_classifier_in_place_and_copy():
    buf = bytearray(b"ab\xff")
    M.to_upper(buf, _Rot1())
    assert buf == b"bc\x00"
    assert M.as_upper(b"ab\xff", _Rot1()) == b"bc\x00"
    assert M.as_lower(b"bc\x00", _Rot1()) == b"ab\xff"


def test_transform_through_writable_memoryview_slice():
    buf = bytearray(b"abcdef")
    M.to_upper(memoryview(buf)[2:4])
    assert buf == b"abCDef"


# ──────────────────────────────────────────────────────────────────────────────
# Case tables
# ──────────────────────────────────────────────────────────────────────────────


def test_ascii_classifier():
    assert T.ASCII.upper(ord("a")) == ord("A")
    assert T.ASCII.lower(ord("Z")) == ord("z")
    assert T.ASCII.upper(ord("1")) == ord("1")
    assert all(T.ASCII.lower(T.ASCII.upper(b)) == b for b in range(0x61, 0x7B))
    assert all(T.ASCII.upper(b) == b for b in range(0x80, 0x100))


def test_get_case_table_ascii_skips_config(monkeypatch):
    monkeypatch.setattr(T, "load_config", lambda *a, **k: pytest.fail("config read"))
    assert T.get_case_table("ASCII") is T.ASCII


def test_bundled_latin1_table():
    latin1 = T.get_case_table("latin1")
    assert M.as_upper(b"caf\xe9", latin1) == b"CAF\xc9"
    assert M.as_lower(b"\xc0\xd7\xde", latin1) == b"\xe0\xd7\xfe"   # 0xD7 (×) untouched
    assert latin1.upper(0xF7) == 0xF7                               # ÷ untouched
    buf = bytearray(b"\xe0b")
    M.to_upper(buf, latin1)
    assert buf == b"\xc0B"


def test_latin1_loads_when_host_sets_data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    latin1 = T.get_case_table("latin1")
    assert M.as_upper(b"\xe9", latin1) == b"\xc9"


def test_unknown_table_name():
    with pytest.raises(T.UnknownCaseTable):
        T.get_case_table("ebcdic")


def test_custom_table_from_data_dir(tmp_path, monkeypatch):
    data = tmp_path / "data"
    data.mkdir()
    (data / "case_tables.json").write_text(
        json.dumps({"digits": {"ranges": [[48, 57, 65]]}}), encoding="utf-8"
    )
    monkeypatch.setenv("BYTESTR_UTILS_DATA_DIR", str(data))
    clear_config_cache()
    digits = T.get_case_table("digits")
    assert M.as_upper(b"0-9", digits) == b"A-J"
    assert M.as_lower(b"AJ", digits) == b"09"


@pytest.mark.parametrize(
    "bad",
    [
        {"x": {"ranges": [[97, 122]]}},
        {"x": {"ranges": [[250, 255, 10], [0, 300, 0]]}},
        {"x": {"ranges": [[0, 10, 250]]}},
        {"x": ["not", "an", "object"]},
    ],
)
def test_invalid_table_config(tmp_path, monkeypatch, bad):
    data = tmp_path / "data"
    data.mkdir()
    (data / "case_tables.json").write_text(json.dumps(bad), encoding="utf-8")
    monkeypatch.setenv("BYTESTR_UTILS_DATA_DIR", str(data))
    clear_config_cache()
    with pytest.raises(ConfigParseError):
        T.get_case_table("x")


def test_table_load_is_traced(monkeypatch, capsys):
    from bytestr_utils.utils import log as LOG

    monkeypatch.setenv(LOG.ENV_VAR, "case")
    LOG.reload_topics()
    try:
        T.get_case_table("latin1")
    finally:
        monkeypatch.delenv(LOG.ENV_VAR)
        LOG.reload_topics()
    assert "loaded case table 'latin1'" in capsys.readouterr().err
