"""Console rendering helpers using rich."""
from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table

from ..types import BuyAmounts, FilteredBalanceChanges, NormalizedSwap


def render_filtered(filtered: FilteredBalanceChanges, swapper: str, console: Optional[Console] = None) -> None:
    console = console or Console()
    table = Table(title=f"Balance changes for {swapper}", show_lines=False)
    table.add_column("Class")
    table.add_column("Mint")
    table.add_column("Account")
    table.add_column("Change")
    for label, changes in (("economic", filtered.economic_changes), ("rent_refund", filtered.rent_refunds)):
        for change in changes:
            table.add_row(label, change.symbol or change.mint, change.address, f"{change.ui_change_amount}")
    console.print(table)


def render_swaps(swaps: Sequence[NormalizedSwap], console: Optional[Console] = None) -> None:
    console = console or Console()
    if not swaps:
        console.print("[yellow]No swaps normalized.[/yellow]")
        return
    table = Table(title="Normalized swaps", show_lines=False)
    table.add_column("Signature")
    table.add_column("Side")
    table.add_column("Base")
    table.add_column("Quote amount")
    table.add_column("Fees (quote)")
    table.add_column("Wallet total")
    for swap in swaps:
        amounts = swap.amounts
        if isinstance(amounts, BuyAmounts):
            quote_amount, wallet_total = amounts.swap_input_amount, amounts.total_wallet_cost
        else:
            quote_amount, wallet_total = amounts.swap_output_amount, amounts.net_wallet_received
        table.add_row(
            swap.signature,
            swap.direction.value,
            f"{amounts.base_amount} {swap.base.symbol}",
            f"{quote_amount}",
            f"{amounts.fee_breakdown.total_fee_quote}",
            f"{wallet_total}",
        )
    console.print(table)
