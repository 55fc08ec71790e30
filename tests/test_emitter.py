from __future__ import annotations
import json
from pathlib import Path
from bindata.emitter import serialize_table, size_mib, write_table

TABLE = {
    "424242": {"b": "VISA", "t": "CREDIT", "i": "JPMORGAN CHASE", "co": "US"},
    "6759": {"b": "MAESTRO", "i": "BANCO ESPAÑOL"},
}

def test_serialization_is_minimized():
    s = serialize_table(TABLE)
    assert " :" not in s and ": " not in s and ", " not in s.replace("JPMORGAN CHASE", "")
    assert s.startswith('{"424242":{"b":"VISA"')
    assert "ESPAÑOL" in s  # non-ASCII kept literally

def test_reserialization_is_byte_identical():
    s = serialize_table(TABLE)
    assert serialize_table(json.loads(s)) == s

def test_write_creates_parent_dirs_and_overwrites(tmp_path: Path):
    out = tmp_path / "public" / "nested" / "bin-data.json"
    res = write_table(TABLE, out)
    assert out.exists()
    assert res.entries == 2
    assert res.n_bytes == len(out.read_bytes())

    write_table({"1234": {"b": "X"}}, out)
    assert json.loads(out.read_text(encoding="utf-8")) == {"1234": {"b": "X"}}

def test_size_mib_rounds_to_two_decimals():
    assert size_mib(0) == 0.0
    assert size_mib(1024 * 1024) == 1.0
    assert size_mib(3 * 1024 * 1024 + 500_000) == 3.48
