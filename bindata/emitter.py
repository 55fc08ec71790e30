# bindata/emitter.py
"""
Serialize the lookup table to minimized JSON and write it to disk.

Output shape:
    {"424242":{"b":"VISA","t":"CREDIT","c":"CLASSIC","i":"JPMORGAN CHASE","co":"US"},...}

No whitespace between tokens, non-ASCII issuer names kept as-is (UTF-8), keys
in table insertion order. Parsing the output and serializing it again gives
the same text.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from .records import LookupTable

_SEPARATORS = (",", ":")


@dataclass
class EmitResult:
    out_path: Path
    entries: int
    n_bytes: int

    @property
    def size_mib(self) -> float:
        return size_mib(self.n_bytes)


def serialize_table(table: LookupTable) -> str:
    return json.dumps(table, ensure_ascii=False, separators=_SEPARATORS)


def size_mib(n_bytes: int) -> float:
    """Size in mebibytes, rounded to two decimals."""
    return round(n_bytes / 1024 / 1024, 2)


def write_table(table: LookupTable, out_path: Path) -> EmitResult:
    """
    Write `table` to `out_path`, creating parent directories and overwriting
    any existing file.
    """
    out_path = Path(out_path)
    payload = serialize_table(table).encode("utf-8")
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(payload)
    return EmitResult(out_path=out_path, entries=len(table), n_bytes=len(payload))
