"""
Builds the compact BIN lookup artifact from the full BIN list CSV.

Input  : bin-list-data.csv (project root)
         columns -> BIN, Brand, Type, Category, Issuer, isoCode2, CountryName
Output : public/bin-data.json
         {"424242": {"b": "VISA", "t": "CREDIT", "c": "CLASSIC", "i": "JPMORGAN CHASE", "co": "US"}, ...}

Usage  : python tools/build_bin_data.py [csvPath]
"""
from __future__ import annotations
import argparse, sys
from pathlib import Path

from bindata.config import BuildConfig
from bindata.errors import BinDataError
from bindata.pipeline import build

def parse(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("csv_path", nargs="?", default=None)
    return ap.parse_args(argv)

def main(argv=None) -> int:
    args = parse(argv)
    cfg = BuildConfig.default().with_paths(csv_path=Path(args.csv_path) if args.csv_path else None)
    try:
        build(cfg)
    except BinDataError as e:
        print(e, file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
