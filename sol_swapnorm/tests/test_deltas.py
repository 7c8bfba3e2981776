from __future__ import annotations

from sol_swapnorm.constants import PRIORITY_ASSETS
from sol_swapnorm.normalization import collect_deltas
from sol_swapnorm.types import TokenBalanceChange

SOL = PRIORITY_ASSETS["SOL"]


def _change(mint: str, amount: int, decimals: int = 6, symbol: str | None = None) -> TokenBalanceChange:
    return TokenBalanceChange(
        address=f"acct-{mint}-{amount}",
        mint=mint,
        decimals=decimals,
        change_amount=amount,
        owner="W1",
        symbol=symbol,
    )


def test_collect_deltas_sums_per_mint() -> None:
    changes = [
        _change(SOL, -600, decimals=9),
        _change("TOKENA1234567890", 50),
        _change(SOL, -400, decimals=9),
    ]
    deltas = collect_deltas(changes)
    assert list(deltas) == [SOL, "TOKENA1234567890"]
    assert deltas[SOL].net_delta == -1000
    assert deltas[SOL].symbol == "SOL"
    assert deltas[SOL].decimals == 9
    assert deltas["TOKENA1234567890"].symbol == "TOKE...7890"
    assert not deltas[SOL].is_intermediate


def test_zero_net_delta_marks_intermediate() -> None:
    changes = [
        _change("ROUTE", -100, symbol="RT"),
        _change("ROUTE", 100, symbol="RT"),
        _change("OUT", 5),
    ]
    deltas = collect_deltas(changes)
    assert deltas["ROUTE"].is_intermediate
    assert deltas["ROUTE"].symbol == "RT"
    assert not deltas["OUT"].is_intermediate


def test_collect_deltas_empty() -> None:
    assert collect_deltas([]) == {}
