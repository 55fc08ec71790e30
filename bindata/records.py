# bindata/records.py
"""
bindata — Record Mapping
========================

Turns tokenized data rows into the lookup table.

Filtering policy
----------------
A row is **skipped** (counted, never raised) when:
1) its key column is missing, empty, or shorter than `min_key_length`;
2) brand, type and issuer are all empty.

Every other row becomes a sparse record: only non-empty attributes are stored,
so a missing code means "unknown", never "empty string".

Record codes
------------
    brand    -> "b"
    type     -> "t"
    category -> "c"
    issuer   -> "i"
    country  -> "co"   (two-letter ISO code column)

Duplicate keys: last row wins; the key keeps the position of its first
occurrence in the table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .config import DEFAULT_MIN_KEY_LENGTH
from .header import NOT_FOUND, HeaderIndex
from .tokenizer import tokenize_line

Record = Dict[str, str]
LookupTable = Dict[str, Record]

RECORD_CODES = {
    "brand": "b",
    "type": "t",
    "category": "c",
    "issuer": "i",
    "country": "co",
}

# At least one of these must be non-empty for a row to be kept.
REQUIRED_ANY = ("brand", "type", "issuer")


@dataclass
class MappingResult:
    """Lookup table plus the counters reported at the end of a build."""

    table: LookupTable = field(default_factory=dict)
    accepted: int = 0
    skipped: int = 0


def column(row: List[str], index: int) -> str:
    """Token at `index`, or "" when the column is absent or the row is short."""
    if index == NOT_FOUND or index >= len(row):
        return ""
    return row[index]


def build_record(
    brand: str = "",
    type: str = "",
    category: str = "",
    issuer: str = "",
    country: str = "",
) -> Record:
    """
    Build a sparse record from attribute values.

    >>> build_record(brand="VISA", type="", issuer="CHASE")
    {'b': 'VISA', 'i': 'CHASE'}
    """
    values = {
        "brand": brand,
        "type": type,
        "category": category,
        "issuer": issuer,
        "country": country,
    }
    return {RECORD_CODES[name]: v for name, v in values.items() if v}


def map_row(row: List[str], header: HeaderIndex, min_key_length: int = DEFAULT_MIN_KEY_LENGTH):
    """
    Map one tokenized row to ``(key, record)``, or None if the row is skipped.
    """
    key = column(row, header.key)
    if not key or len(key) < min_key_length:
        return None

    attrs = {name: column(row, getattr(header, name)) for name in RECORD_CODES}
    if not any(attrs[name] for name in REQUIRED_ANY):
        return None
    return key, build_record(**attrs)


def map_rows(
    lines: Iterable[str],
    header: HeaderIndex,
    min_key_length: int = DEFAULT_MIN_KEY_LENGTH,
) -> MappingResult:
    """
    Tokenize and map every data line (header excluded) into a lookup table.

    `accepted` counts rows written to the table, duplicates included, so
    `accepted` may exceed `len(table)`.
    """
    result = MappingResult()
    for line in lines:
        mapped = map_row(tokenize_line(line), header, min_key_length)
        if mapped is None:
            result.skipped += 1
            continue
        key, record = mapped
        result.table[key] = record
        result.accepted += 1
    return result
