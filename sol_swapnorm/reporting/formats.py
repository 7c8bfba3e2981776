"""Output writers for CSV and Parquet reports."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence, Tuple

import pandas as pd

from ..types import BuyAmounts, FilteredBalanceChanges, NormalizedSwap
from .schema import BALANCE_CHANGE_COLUMNS, NORMALIZED_SWAP_COLUMNS


def swap_row(swap: NormalizedSwap) -> dict:
    """Flatten a swap; the fields of the other direction are left empty."""

    amounts = swap.amounts
    fees = amounts.fee_breakdown
    row = {
        "signature": swap.signature,
        "swapper": swap.swapper,
        "direction": swap.direction.value,
        "quote_mint": swap.quote.mint,
        "quote_symbol": swap.quote.symbol,
        "base_mint": swap.base.mint,
        "base_symbol": swap.base.symbol,
        "base_amount": amounts.base_amount,
        "swap_input_amount": None,
        "total_wallet_cost": None,
        "swap_output_amount": None,
        "net_wallet_received": None,
        "transaction_fee_sol": str(fees.transaction_fee_sol),
        "transaction_fee_quote": str(fees.transaction_fee_quote),
        "platform_fee": str(fees.platform_fee),
        "priority_fee": str(fees.priority_fee),
        "total_fee_quote": str(fees.total_fee_quote),
        "rent_refunds_filtered": swap.rent_refunds_filtered,
        "intermediate_assets": ",".join(swap.intermediate_assets),
    }
    if isinstance(amounts, BuyAmounts):
        row["swap_input_amount"] = amounts.swap_input_amount
        row["total_wallet_cost"] = str(amounts.total_wallet_cost)
    else:
        row["swap_output_amount"] = amounts.swap_output_amount
        row["net_wallet_received"] = str(amounts.net_wallet_received)
    return row


def swaps_to_frame(swaps: Sequence[NormalizedSwap]) -> pd.DataFrame:
    # decimals are kept as strings so CSV output stays exact
    return pd.DataFrame([swap_row(swap) for swap in swaps], columns=NORMALIZED_SWAP_COLUMNS)


def write_csv(path: Path, swaps: Sequence[NormalizedSwap]) -> None:
    df = swaps_to_frame(swaps)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)


def write_parquet(path: Path, swaps: Sequence[NormalizedSwap]) -> None:
    df = swaps_to_frame(swaps)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_parquet(path, index=False)


def export_reports(outdir: Path, swaps: Sequence[NormalizedSwap], *, fmt: str = "csv") -> list[Path]:
    outdir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    if fmt in ("csv", "both"):
        path = outdir / "normalized_swaps.csv"
        write_csv(path, swaps)
        written.append(path)
    if fmt in ("parquet", "both"):
        path = outdir / "normalized_swaps.parquet"
        write_parquet(path, swaps)
        written.append(path)
    if fmt == "xlsx":
        from .xlsx import write_xlsx

        path = outdir / "normalized_swaps.xlsx"
        write_xlsx(path, swaps)
        written.append(path)
    return written


def filtered_to_frame(partitions: Iterable[Tuple[str, FilteredBalanceChanges]]) -> pd.DataFrame:
    """One row per owned balance change, labelled economic or rent_refund."""

    rows = []
    for signature, filtered in partitions:
        for label, changes in (("economic", filtered.economic_changes), ("rent_refund", filtered.rent_refunds)):
            for change in changes:
                rows.append(
                    {
                        "signature": signature,
                        "classification": label,
                        "address": change.address,
                        "mint": change.mint,
                        "owner": change.owner,
                        "decimals": change.decimals,
                        "change_amount": change.change_amount,
                        "ui_change_amount": str(change.ui_change_amount),
                    }
                )
    return pd.DataFrame(rows, columns=BALANCE_CHANGE_COLUMNS)


def export_filtered(outdir: Path, partitions: Iterable[Tuple[str, FilteredBalanceChanges]]) -> Path:
    path = outdir / "balance_changes.csv"
    path.parent.mkdir(parents=True, exist_ok=True)
    filtered_to_frame(partitions).to_csv(path, index=False)
    return path
