"""
bindata/cli.py

Main Typer application for bindata. Assembles the `build` command and the
`lookup` sub-CLI under the single `bindata` command.

    bindata build                         # bin-list-data.csv -> public/bin-data.json
    bindata build path/to/bins.csv --out dist/bin-data.json
    bindata build --config bindata.yaml
    bindata lookup match 424242
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from bindata import lookup as lookup_cli
from bindata.config import BuildConfig, load_config
from bindata.errors import BinDataError
from bindata.pipeline import build as build_fn

console = Console()
app = typer.Typer(no_args_is_help=True)
app.add_typer(lookup_cli.app, name="lookup")


@app.command()
def build(
    csv_path: Optional[Path] = typer.Argument(None, help="Input CSV (default: bin-list-data.csv at the project root)."),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output JSON path."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file."),
):
    """Convert the BIN CSV into the compact JSON lookup."""
    try:
        cfg = load_config(config) if config else BuildConfig.default()
        build_fn(cfg.with_paths(csv_path=csv_path, out_path=out), out=console)
    except BinDataError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(1)


def main():
    app()


if __name__ == "__main__":
    main()
