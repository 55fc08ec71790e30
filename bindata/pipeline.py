# bindata/pipeline.py
"""
bindata — Build Pipeline
========================

Loader -> Header Resolver -> Record Mapper -> Emitter, run once, in order.

Fatal conditions (`NotFoundError`, `SchemaError`) propagate before anything is
written, so a failed run never leaves a partial artifact behind. Callers decide
how to report them (see `bindata.cli`).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rich.console import Console

from .config import BuildConfig
from .emitter import write_table
from .errors import SchemaError
from .header import resolve_header
from .loader import load_lines
from .records import map_rows

console = Console()


@dataclass
class BuildSummary:
    out_path: Path
    entries: int
    accepted: int
    skipped: int
    n_bytes: int
    size_mib: float


def build(config: BuildConfig, out: Optional[Console] = None) -> BuildSummary:
    """
    Convert `config.csv_path` into the JSON lookup at `config.out_path`.

    Parameters
    ----------
    config : BuildConfig
        Paths, header names and key length threshold for this run.
    out : rich.console.Console, optional
        Where progress and the summary are printed (module console by default).

    Returns
    -------
    BuildSummary
        Counts and output size, as printed in the summary block.

    Raises
    ------
    NotFoundError
        Input CSV missing.
    SchemaError
        Key column missing from the header.
    """
    out = out or console

    out.log(f"Reading CSV from: {config.csv_path}", markup=False)
    lines = load_lines(config.csv_path)
    if not lines:  # no header row at all
        raise SchemaError(f"{config.columns.key} column not found in CSV (empty file)")

    header = resolve_header(lines[0], config.columns)
    out.log(f"Headers: {', '.join(header.names)}", markup=False)
    out.log(f"Total rows: {len(lines) - 1}")
    missing = header.missing()
    if missing:
        out.log(f"[yellow]Columns not found[/] (left out of records): {', '.join(missing)}")

    result = map_rows(lines[1:], header, config.min_key_length)
    emitted = write_table(result.table, config.out_path)

    summary = BuildSummary(
        out_path=emitted.out_path,
        entries=emitted.entries,
        accepted=result.accepted,
        skipped=result.skipped,
        n_bytes=emitted.n_bytes,
        size_mib=emitted.size_mib,
    )
    print_summary(summary, out)
    return summary


def print_summary(summary: BuildSummary, out: Optional[Console] = None) -> None:
    out = out or console
    out.rule("[bold]Summary")
    out.print(f"Generated: {summary.out_path}", markup=False, highlight=False)
    out.print(f"Entries: [bold]{summary.entries}[/]")
    out.print(f"Skipped: [bold]{summary.skipped}[/]")
    out.print(f"File size: [bold]{summary.size_mib:.2f} MB[/]")
