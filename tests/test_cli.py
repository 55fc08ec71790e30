"""
tests/test_cli.py

CLI surface: exit codes of `bindata build`, `bindata lookup match` and the
plain `tools/build_bin_data.py` script.
"""
from __future__ import annotations
import json
from pathlib import Path
from typer.testing import CliRunner
from bindata.cli import app
from tools.build_bin_data import main as script_main

runner = CliRunner()
CSV = "BIN,Brand,Type,Category,Issuer,isoCode2,CountryName\n424242,VISA,CREDIT,CLASSIC,CHASE,US,United States\n"


def _csv(tmp_path: Path, text: str = CSV) -> Path:
    p = tmp_path / "bins.csv"
    p.write_text(text, encoding="utf-8")
    return p


def test_build_ok(tmp_path: Path):
    out = tmp_path / "public" / "bin-data.json"
    r = runner.invoke(app, ["build", str(_csv(tmp_path)), "--out", str(out)])
    assert r.exit_code == 0, r.output
    assert json.loads(out.read_text(encoding="utf-8"))["424242"]["i"] == "CHASE"


def test_build_missing_csv_exits_1(tmp_path: Path):
    out = tmp_path / "bin-data.json"
    r = runner.invoke(app, ["build", str(tmp_path / "nope.csv"), "--out", str(out)])
    assert r.exit_code == 1
    assert "CSV not found" in r.output
    assert not out.exists()


def test_build_missing_bin_column_exits_1(tmp_path: Path):
    out = tmp_path / "bin-data.json"
    r = runner.invoke(app, ["build", str(_csv(tmp_path, "Brand\nVISA\n")), "--out", str(out)])
    assert r.exit_code == 1
    assert "BIN column not found" in r.output
    assert not out.exists()


def test_build_with_config(tmp_path: Path):
    _csv(tmp_path)
    cfg = tmp_path / "bindata.yaml"
    cfg.write_text("csv_path: bins.csv\nout_path: dist/bin-data.json\n", encoding="utf-8")
    r = runner.invoke(app, ["build", "--config", str(cfg)])
    assert r.exit_code == 0, r.output
    assert (tmp_path / "dist" / "bin-data.json").exists()


def test_lookup_match(tmp_path: Path):
    data = tmp_path / "bin-data.json"
    data.write_text(json.dumps({"424242": {"b": "VISA", "i": "CHASE"}}), encoding="utf-8")
    r = runner.invoke(app, ["lookup", "match", "4242424242424242", "--data", str(data)])
    assert r.exit_code == 0, r.output
    assert "CHASE" in r.output

    r = runner.invoke(app, ["lookup", "match", "5100000000000000", "--data", str(data)])
    assert r.exit_code == 1


def test_lookup_missing_data_exits_1(tmp_path: Path):
    r = runner.invoke(app, ["lookup", "match", "424242", "--data", str(tmp_path / "x.json")])
    assert r.exit_code == 1


def test_script_exit_codes(tmp_path: Path, monkeypatch):
    out = tmp_path / "public" / "bin-data.json"
    monkeypatch.setattr("bindata.config.DEFAULT_OUT_PATH", out)
    assert script_main([str(tmp_path / "missing.csv")]) == 1
    assert not out.exists()
    assert script_main([str(_csv(tmp_path))]) == 0
    assert json.loads(out.read_text(encoding="utf-8")) == {
        "424242": {"b": "VISA", "t": "CREDIT", "c": "CLASSIC", "i": "CHASE", "co": "US"},
    }
