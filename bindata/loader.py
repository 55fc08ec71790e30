# bindata/loader.py
"""Read the whole input CSV into memory as a list of non-blank lines."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .errors import NotFoundError


def load_lines(csv_path: Path) -> List[str]:
    """
    Return every non-blank line of `csv_path`.

    Lines are split on ``\\n`` only and returned unmodified; lines that are
    empty or whitespace-only are dropped. A leading byte-order mark is
    removed and undecodable bytes become U+FFFD, so one bad byte only
    affects the row it sits in.

    Raises
    ------
    NotFoundError
        If `csv_path` is not an existing file. Nothing is read in that case.
    """
    p = Path(csv_path)
    if not p.is_file():
        raise NotFoundError(f"CSV not found: {p}")
    raw = p.read_text(encoding="utf-8-sig", errors="replace")
    return [line for line in raw.split("\n") if line.strip()]
