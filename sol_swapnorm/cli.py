"""Typer CLI for the sol_swapnorm application."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from rich.logging import RichHandler

from .config import AppSettings, load_settings
from .constants import SOL_MINT
from .errors import SwapNormError
from .ingestion import records
from .pipeline import SwapPipeline
from .reporting import console as console_report
from .reporting import formats
from .types import NormalizedSwap

app = typer.Typer(help="Solana swap amount normalization")


def _configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def _settings(config: Optional[Path], overrides: Dict[str, Any]) -> AppSettings:
    settings = load_settings(config, {key: value for key, value in overrides.items() if value is not None})
    _configure_logging(settings)
    return settings


@app.command("filter")
def filter_cmd(
    path: Path = typer.Argument(..., help="Transaction file (.json or .jsonl)"),
    wallet: Optional[str] = typer.Option(None, "--wallet", "-w", help="Swapper wallet address"),
    config: Optional[Path] = typer.Option(None, "--config", help="Config YAML"),
    outdir: Optional[Path] = typer.Option(None, "--outdir", help="Write balance_changes.csv here"),
) -> None:
    """Split each transaction's balance changes into economic changes and rent refunds."""

    settings = _settings(config, {})
    rent_filter = settings.rent_filter()
    try:
        txs = records.load_transactions(path, swapper=wallet)
    except SwapNormError as exc:
        raise typer.BadParameter(str(exc)) from exc
    partitions = []
    refunds = 0
    for tx in txs:
        filtered = rent_filter.filter_rent_noise(tx.token_balance_changes, tx.swapper)
        refunds += len(filtered.rent_refunds)
        partitions.append((tx.signature, filtered))
        console_report.render_filtered(filtered, tx.swapper)
    if outdir is not None:
        typer.echo(f"Wrote {formats.export_filtered(outdir, partitions)}")
    typer.echo(f"Filtered {len(txs)} transaction(s), {refunds} rent refund(s)")


@app.command()
def normalize(
    path: Path = typer.Argument(..., help="Transaction file (.json or .jsonl)"),
    base: str = typer.Option(..., "--base", help="Base asset mint"),
    quote: str = typer.Option(SOL_MINT, "--quote", help="Quote asset mint"),
    wallet: Optional[str] = typer.Option(None, "--wallet", "-w", help="Swapper wallet address"),
    config: Optional[Path] = typer.Option(None, "--config", help="Config YAML"),
    outdir: Optional[Path] = typer.Option(None, "--outdir", help="Output directory"),
    fmt: Optional[str] = typer.Option(None, "--format", help="Report format: csv, parquet, both or xlsx"),
) -> None:
    """Normalize swap amounts and export them."""

    settings = _settings(config, {"outdir": outdir, "report_format": fmt})
    pipeline = SwapPipeline(rent_filter=settings.rent_filter(), normalizer=settings.amount_normalizer())
    swaps: List[NormalizedSwap] = []
    try:
        txs = records.load_transactions(path, swapper=wallet)
        for tx in txs:
            swaps.append(pipeline.process(tx, quote_mint=quote, base_mint=base))
    except SwapNormError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    written = formats.export_reports(settings.outdir, swaps, fmt=settings.report_format)
    console_report.render_swaps(swaps)
    for item in written:
        typer.echo(f"Wrote {item}")


if __name__ == "__main__":  # pragma: no cover
    app()
