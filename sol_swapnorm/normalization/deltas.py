"""Aggregation of economic balance changes into per-mint net deltas."""
from __future__ import annotations

import logging
from typing import Dict, Iterable

from ..constants import symbol_for_mint
from ..types import AssetDelta, TokenBalanceChange

logger = logging.getLogger(__name__)


def collect_deltas(economic_changes: Iterable[TokenBalanceChange]) -> Dict[str, AssetDelta]:
    """Sum changes per mint, in first-seen order.

    A mint whose changes cancel out only passed through a routed swap and is
    flagged ``is_intermediate``.
    """

    totals: Dict[str, int] = {}
    first_seen: Dict[str, TokenBalanceChange] = {}
    for change in economic_changes:
        if change.mint not in first_seen:
            first_seen[change.mint] = change
            totals[change.mint] = 0
        totals[change.mint] += change.change_amount
    deltas: Dict[str, AssetDelta] = {}
    for mint, net_delta in totals.items():
        sample = first_seen[mint]
        deltas[mint] = AssetDelta(
            mint=mint,
            symbol=sample.symbol or symbol_for_mint(mint),
            net_delta=net_delta,
            decimals=sample.decimals,
            is_intermediate=net_delta == 0,
        )
    logger.debug(
        "Collected %d asset deltas (%d intermediate)",
        len(deltas),
        sum(1 for delta in deltas.values() if delta.is_intermediate),
    )
    return deltas
