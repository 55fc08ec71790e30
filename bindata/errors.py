# bindata/errors.py
"""
Exceptions raised by the bindata build pipeline.

Only the fatal conditions are modeled here. Rows that fail filtering are
counted as skipped by `bindata.records` and never raise.
"""

from __future__ import annotations


class BinDataError(Exception):
    """Base class for bindata failures."""


class NotFoundError(BinDataError, FileNotFoundError):
    """The input CSV path does not exist."""


class SchemaError(BinDataError, ValueError):
    """The header lacks the mandatory key column."""


class ConfigError(BinDataError, ValueError):
    """A YAML config file is malformed or carries unknown keys."""
