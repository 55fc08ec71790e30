"""
bindata/lookup.py

Reader side of the BIN artifact: longest-prefix lookup of a card number.

This module provides:
- `normalize_number()` to strip spaces, dashes and other non-digits.
- A `BinTable` wrapper around the loaded JSON that resolves a number to the
  longest key that prefixes it.
- A small Typer sub-CLI:
    bindata lookup match "4242 4242 4242 4242"
    bindata lookup match 424242 --data public/bin-data.json

Design notes:
- Keys in the artifact have variable length (4 digits and up). We probe the
  first `MAX_PREFIX_LENGTH` digits first and shorten one digit at a time, so
  the most specific entry wins.
- Records stay in their compact form (`b`, `t`, `c`, `i`, `co`) until
  displayed; `expand_record` turns them back into readable field names.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

import regex as re
import typer
from rich.console import Console
from rich.table import Table

from .config import DEFAULT_MIN_KEY_LENGTH, DEFAULT_OUT_PATH
from .errors import NotFoundError
from .records import RECORD_CODES, LookupTable, Record

console = Console()
app = typer.Typer(no_args_is_help=True)

MAX_PREFIX_LENGTH = 8

_NONDIGIT = re.compile(r"\D+")
_CODE_TO_NAME = {code: name for name, code in RECORD_CODES.items()}


def normalize_number(s: str) -> str:
    """
    Keep only the digits of a card number or prefix.

    >>> normalize_number("4242-4242 4242 4242")
    '4242424242424242'
    """
    return _NONDIGIT.sub("", s or "")


def expand_record(record: Record) -> Dict[str, str]:
    """Map compact codes back to field names; unknown codes are dropped."""
    return {_CODE_TO_NAME[k]: v for k, v in record.items() if k in _CODE_TO_NAME}


@dataclass(frozen=True)
class BinMatch:
    prefix: str
    record: Record


class BinTable:
    """
    Longest-prefix resolver over a loaded lookup table.

    Parameters
    ----------
    table : dict
        Mapping of BIN prefix -> compact record, as written by the build.
    min_length, max_length : int
        Shortest and longest prefixes probed.
    """

    def __init__(
        self,
        table: LookupTable,
        min_length: int = DEFAULT_MIN_KEY_LENGTH,
        max_length: int = MAX_PREFIX_LENGTH,
    ):
        self.table = table
        self.min_length = min_length
        self.max_length = max_length

    @classmethod
    def load(cls, path: Path = DEFAULT_OUT_PATH) -> "BinTable":
        """
        Load a built artifact.

        Raises
        ------
        NotFoundError
            If the JSON file does not exist.
        """
        path = Path(path)
        if not path.exists():
            raise NotFoundError(f"BIN data not found: {path}")
        return cls(json.loads(path.read_text(encoding="utf-8")))

    def __len__(self) -> int:
        return len(self.table)

    def match(self, number: str) -> Optional[BinMatch]:
        """
        Resolve `number` to the longest known prefix, or None.

        Numbers shorter than `min_length` digits never match.
        """
        digits = normalize_number(number)
        for n in range(min(len(digits), self.max_length), self.min_length - 1, -1):
            prefix = digits[:n]
            record = self.table.get(prefix)
            if record is not None:
                return BinMatch(prefix=prefix, record=record)
        return None


# -------------------------
# Typer sub-commands
# -------------------------

@app.command()
def match(number: str, data: Path = typer.Option(DEFAULT_OUT_PATH, "--data", "-d")):
    """
    Look up the issuer record for a card number or BIN prefix.

    Examples
    --------
    bindata lookup match "4242 4242 4242 4242"
    """
    try:
        table = BinTable.load(data)
    except NotFoundError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    hit = table.match(number)
    if hit is None:
        console.print(f"[yellow]No BIN entry for[/] {normalize_number(number) or number!r}")
        raise typer.Exit(1)

    out = Table(title=f"BIN {hit.prefix}")
    out.add_column("field")
    out.add_column("value")
    for name, value in expand_record(hit.record).items():
        out.add_row(name, value)
    console.print(out)
