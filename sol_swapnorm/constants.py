"""Well-known Solana identifiers and thresholds."""
from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

PRIORITY_ASSETS: Mapping[str, str] = MappingProxyType(
    {
        "SOL": "So11111111111111111111111111111111111111112",
        # wrapped SOL shares the native mint once indexers normalize it
        "WSOL": "So11111111111111111111111111111111111111112",
        "USDC": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
        "USDT": "Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB",
    }
)

SOL_MINT = PRIORITY_ASSETS["SOL"]
LAMPORTS_PER_SOL = Decimal("1000000000")

# positive native credits strictly below this are rent refunds
RENT_NOISE_THRESHOLD_SOL = Decimal("0.01")

KNOWN_SYMBOLS: Mapping[str, str] = MappingProxyType(
    {
        PRIORITY_ASSETS["SOL"]: "SOL",
        PRIORITY_ASSETS["USDC"]: "USDC",
        PRIORITY_ASSETS["USDT"]: "USDT",
    }
)


def symbol_for_mint(mint: str) -> str:
    """Return a display symbol, shortening unknown mints to ``abcd...wxyz``."""

    known = KNOWN_SYMBOLS.get(mint)
    if known:
        return known
    if len(mint) <= 8:
        return mint
    return f"{mint[:4]}...{mint[-4:]}"
