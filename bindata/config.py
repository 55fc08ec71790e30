# bindata/config.py
"""
Build configuration for the BIN lookup artifact.

Paths and header names are passed into the pipeline through a `BuildConfig`
instead of being read from module globals, so tests can point a build at
synthetic inputs and a temporary output directory.

A config can come from three places, later ones winning:
1) `BuildConfig.default()`  (project-root-relative paths, stock header names)
2) an optional YAML file    (`load_config`)
3) CLI flags                (`BuildConfig.with_paths`)

YAML layout
-----------
    csv_path: data/bin-list-data.csv
    out_path: public/bin-data.json
    min_key_length: 4
    columns:
      key: BIN
      brand: Brand
      type: Type
      category: Category
      issuer: Issuer
      country: isoCode2
      country_name: CountryName
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError, NotFoundError

# Repository root (bindata/ lives directly beneath it).
ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CSV_PATH = ROOT / "bin-list-data.csv"
DEFAULT_OUT_PATH = ROOT / "public" / "bin-data.json"
DEFAULT_MIN_KEY_LENGTH = 4


@dataclass(frozen=True)
class ColumnNames:
    """Header name for each field role (exact, case-sensitive match)."""

    key: str = "BIN"
    brand: str = "Brand"
    type: str = "Type"
    category: str = "Category"
    issuer: str = "Issuer"
    country: str = "isoCode2"
    country_name: str = "CountryName"

    def as_dict(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class BuildConfig:
    """
    Everything one build run needs to know.

    Attributes
    ----------
    csv_path : Path
        Input CSV (header row + one BIN record per line).
    out_path : Path
        Destination of the minimized JSON lookup; overwritten on every run.
    columns : ColumnNames
        Header names mapped to field roles.
    min_key_length : int
        Rows whose key is shorter than this are skipped.
    """

    csv_path: Path
    out_path: Path
    columns: ColumnNames = ColumnNames()
    min_key_length: int = DEFAULT_MIN_KEY_LENGTH

    @classmethod
    def default(cls) -> "BuildConfig":
        return cls(csv_path=DEFAULT_CSV_PATH, out_path=DEFAULT_OUT_PATH)

    def with_paths(self, csv_path: Optional[Path] = None, out_path: Optional[Path] = None) -> "BuildConfig":
        """Return a copy with the given paths overridden (None keeps the current one)."""
        return replace(
            self,
            csv_path=Path(csv_path) if csv_path is not None else self.csv_path,
            out_path=Path(out_path) if out_path is not None else self.out_path,
        )


_TOP_LEVEL_KEYS = {"csv_path", "out_path", "min_key_length", "columns"}


def load_config(path: Path, base: Optional[BuildConfig] = None) -> BuildConfig:
    """
    Overlay a YAML config file on top of `base` (defaults when omitted).

    Relative paths in the file are resolved against the file's directory.

    Raises
    ------
    NotFoundError
        If the config file does not exist.
    ConfigError
        If the document is not a mapping, carries unknown keys, or holds a
        non-integer `min_key_length`.
    """
    path = Path(path)
    if not path.exists():
        raise NotFoundError(f"Config file not found: {path}")
    base = base or BuildConfig.default()

    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping: {path}")
    unknown = set(data) - _TOP_LEVEL_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {sorted(unknown)}")

    here = path.parent
    cfg = base
    if "csv_path" in data:
        cfg = replace(cfg, csv_path=_resolve(here, data["csv_path"]))
    if "out_path" in data:
        cfg = replace(cfg, out_path=_resolve(here, data["out_path"]))
    if "min_key_length" in data:
        cfg = replace(cfg, min_key_length=_parse_int("min_key_length", data["min_key_length"]))
    if "columns" in data:
        cfg = replace(cfg, columns=_parse_columns(cfg.columns, data["columns"]))
    return cfg


def _resolve(here: Path, value: Any) -> Path:
    p = Path(str(value)).expanduser()
    return p if p.is_absolute() else here / p


def _parse_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    return value


def _parse_columns(current: ColumnNames, raw: Any) -> ColumnNames:
    if not isinstance(raw, dict):
        raise ConfigError("columns must be a mapping of role -> header name")
    known = current.as_dict()
    unknown = set(raw) - set(known)
    if unknown:
        raise ConfigError(f"Unknown column roles: {sorted(unknown)}")
    return replace(current, **{role: str(name) for role, name in raw.items()})
