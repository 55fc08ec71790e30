"""
tests/test_lookup.py

Longest-prefix resolution over a built table.
"""
from __future__ import annotations
import json
from pathlib import Path
import pytest
from bindata.errors import NotFoundError
from bindata.lookup import BinTable, expand_record, normalize_number

TABLE = {
    "4242": {"b": "VISA"},
    "424242": {"b": "VISA", "t": "CREDIT", "i": "STRIPE TEST BANK", "co": "US"},
    "51000000": {"b": "MASTERCARD", "t": "DEBIT"},
}


def test_normalize_number_keeps_digits():
    assert normalize_number("4242 4242-4242 4242") == "4242424242424242"
    assert normalize_number("") == ""


def test_longest_prefix_wins():
    t = BinTable(TABLE)
    hit = t.match("4242 4242 4242 4242")
    assert hit is not None and hit.prefix == "424242"
    assert t.match("4242 1111 1111 1111").prefix == "4242"
    assert t.match("5100 0000 1234 5678").prefix == "51000000"


def test_no_match_and_too_short():
    t = BinTable(TABLE)
    assert t.match("3782 822463 10005") is None
    assert t.match("424") is None


def test_expand_record():
    assert expand_record(TABLE["424242"]) == {
        "brand": "VISA", "type": "CREDIT", "issuer": "STRIPE TEST BANK", "country": "US",
    }


def test_load_from_file(tmp_path: Path):
    p = tmp_path / "bin-data.json"
    p.write_text(json.dumps(TABLE), encoding="utf-8")
    t = BinTable.load(p)
    assert len(t) == 3
    with pytest.raises(NotFoundError):
        BinTable.load(tmp_path / "missing.json")
