# bindata/header.py
"""
Header resolution: column name -> position, once per run.

`resolve_header` maps every role of a `ColumnNames` to the zero-based index
of its first exact match in the header row. Roles whose column is absent get
`NOT_FOUND`; only the key role is mandatory.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .config import ColumnNames
from .errors import SchemaError
from .tokenizer import split_header

NOT_FOUND = -1


@dataclass(frozen=True)
class HeaderIndex:
    """Resolved column positions; `NOT_FOUND` marks an absent column."""

    names: Tuple[str, ...]
    key: int
    brand: int = NOT_FOUND
    type: int = NOT_FOUND
    category: int = NOT_FOUND
    issuer: int = NOT_FOUND
    country: int = NOT_FOUND
    country_name: int = NOT_FOUND

    def missing(self) -> List[str]:
        """Roles whose column was not found in the header."""
        roles = ("brand", "type", "category", "issuer", "country", "country_name")
        return [r for r in roles if getattr(self, r) == NOT_FOUND]


def _index_of(names: List[str], wanted: str) -> int:
    try:
        return names.index(wanted)
    except ValueError:
        return NOT_FOUND


def resolve_header(line: str, columns: ColumnNames = ColumnNames()) -> HeaderIndex:
    """
    Parse the header line and locate each configured column.

    Parameters
    ----------
    line : str
        First line of the input file.
    columns : ColumnNames
        Header names to look for (exact, case-sensitive).

    Returns
    -------
    HeaderIndex

    Raises
    ------
    SchemaError
        If the key column is absent.
    """
    names = split_header(line)
    positions: Dict[str, int] = {
        role: _index_of(names, name) for role, name in columns.as_dict().items()
    }
    if positions["key"] == NOT_FOUND:
        raise SchemaError(f"{columns.key} column not found in CSV")
    return HeaderIndex(names=tuple(names), **positions)
