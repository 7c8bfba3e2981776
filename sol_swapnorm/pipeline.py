"""Composition of rent filtering, delta collection and amount normalization."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, Optional

from .errors import AssetNotFound, InvalidDirection
from .filtering import BalanceChangeFilter, RentRefundFilter
from .normalization import AmountNormalizer, SwapAmountNormalizer, collect_deltas
from .types import AssetDelta, NormalizedSwap, SwapTransaction, TradeDirection

logger = logging.getLogger(__name__)


def infer_direction(quote: AssetDelta) -> TradeDirection:
    """Quote leaving the wallet is a BUY, quote arriving is a SELL."""
    if quote.net_delta < 0:
        return TradeDirection.BUY
    if quote.net_delta > 0:
        return TradeDirection.SELL
    raise InvalidDirection(f"Quote delta for {quote.mint} is zero; direction is undefined")


def _lookup(deltas: Dict[str, AssetDelta], mint: str, role: str, signature: str) -> AssetDelta:
    delta = deltas.get(mint)
    if delta is None:
        raise AssetNotFound(f"{role} mint {mint} has no economic change in {signature}")
    return delta


class SwapPipeline:
    """Run one transaction through filter, collector and normalizer.

    Which mints are quote and base is decided by the caller.
    """

    def __init__(
        self,
        *,
        rent_filter: Optional[BalanceChangeFilter] = None,
        normalizer: Optional[SwapAmountNormalizer] = None,
    ) -> None:
        self.rent_filter = rent_filter or RentRefundFilter()
        self.normalizer = normalizer or AmountNormalizer()

    def process(self, tx: SwapTransaction, *, quote_mint: str, base_mint: str) -> NormalizedSwap:
        filtered = self.rent_filter.filter_rent_noise(tx.token_balance_changes, tx.swapper)
        deltas = collect_deltas(filtered.economic_changes)
        quote = _lookup(deltas, quote_mint, "quote", tx.signature)
        base = _lookup(deltas, base_mint, "base", tx.signature)
        direction = infer_direction(quote)
        amounts = self.normalizer.normalize(quote, base, direction, tx.fees)
        intermediates = tuple(
            delta.symbol for delta in deltas.values() if delta.is_intermediate
        )
        logger.debug(
            "Normalized %s direction=%s rent_refunds=%d intermediates=%d",
            tx.signature,
            direction.value,
            len(filtered.rent_refunds),
            len(intermediates),
        )
        return NormalizedSwap(
            signature=tx.signature,
            swapper=tx.swapper,
            direction=direction,
            quote=quote,
            base=base,
            amounts=amounts,
            rent_refunds_filtered=len(filtered.rent_refunds),
            intermediate_assets=intermediates,
        )

    def process_many(
        self, txs: Iterable[SwapTransaction], *, quote_mint: str, base_mint: str
    ) -> Iterator[NormalizedSwap]:
        for tx in txs:
            yield self.process(tx, quote_mint=quote_mint, base_mint=base_mint)
