from __future__ import annotations

import json

from typer.testing import CliRunner

from sol_swapnorm.cli import app
from sol_swapnorm.constants import PRIORITY_ASSETS

SOL = PRIORITY_ASSETS["SOL"]

runner = CliRunner()


def _write_txs(path) -> None:
    tx = {
        "signature": "sig1",
        "fee_payer": "W1",
        "fee": 5000,
        "token_balance_changes": [
            {"address": "a", "mint": SOL, "decimals": 9, "change_amount": -1000000000, "owner": "W1"},
            {"address": "b", "mint": SOL, "decimals": 9, "change_amount": 2039280, "owner": "W1"},
            {"address": "c", "mint": "TOKEN", "decimals": 6, "change_amount": 5000000, "owner": "W1"},
        ],
    }
    path.write_text(json.dumps(tx) + "\n")


def test_filter_command(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "txs.jsonl"
    _write_txs(source)
    result = runner.invoke(app, ["filter", str(source)])
    assert result.exit_code == 0, result.output
    assert "1 rent refund(s)" in result.output


def test_filter_command_writes_balance_changes(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "txs.jsonl"
    _write_txs(source)
    outdir = tmp_path / "out"
    result = runner.invoke(app, ["filter", str(source), "--outdir", str(outdir)])
    assert result.exit_code == 0, result.output
    written = (outdir / "balance_changes.csv").read_text().splitlines()
    assert written[0].startswith("signature,classification")
    assert len(written) == 4
    assert "rent_refund" in written[-1]


def test_normalize_command_writes_csv(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "txs.jsonl"
    _write_txs(source)
    outdir = tmp_path / "out"
    result = runner.invoke(app, ["normalize", str(source), "--base", "TOKEN", "--outdir", str(outdir)])
    assert result.exit_code == 0, result.output
    assert (outdir / "normalized_swaps.csv").exists()


def test_normalize_command_missing_asset(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "txs.jsonl"
    _write_txs(source)
    result = runner.invoke(app, ["normalize", str(source), "--base", "MISSING"])
    assert result.exit_code == 1
