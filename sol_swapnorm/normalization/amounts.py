"""Direction-aware swap amounts with fee breakdown."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import logging
from typing import Protocol, Union

from ..constants import SOL_MINT
from ..errors import InvalidDirection, InvalidFeeData
from ..types import AssetDelta, BuyAmounts, FeeBreakdown, FeeData, SellAmounts, TradeDirection
from ..utils import exact_context

logger = logging.getLogger(__name__)


class SwapAmountNormalizer(Protocol):
    def normalize(
        self,
        quote: AssetDelta,
        base: AssetDelta,
        direction: Union[TradeDirection, str],
        fees: FeeData,
    ) -> Union[BuyAmounts, SellAmounts]:
        ...


def coerce_direction(direction: Union[TradeDirection, str]) -> TradeDirection:
    try:
        return TradeDirection(direction)
    except ValueError:
        raise InvalidDirection(f"Unsupported trade direction: {direction!r}") from None


def _validate_fees(fees: FeeData) -> None:
    for name in ("transaction_fee", "priority_fee", "platform_fee"):
        value = getattr(fees, name)
        if value < 0:
            raise InvalidFeeData(f"{name} must be non-negative, got {value}")
def build_fee_breakdown(
    fees: FeeData, quote_mint: str = SOL_MINT, *, native_mint: str = SOL_MINT
) -> FeeBreakdown:
    """Express fees in quote terms.

    The transaction fee is taken 1:1 in the quote asset. That is exact for a
    native quote; other quotes are reported with the same rule and a warning.
    """

    _validate_fees(fees)
    if quote_mint != native_mint:
        logger.warning("No SOL rate for quote mint=%s, using 1:1 transaction fee", quote_mint)
    transaction_fee_quote = fees.transaction_fee
    with exact_context():
        total = transaction_fee_quote + fees.platform_fee + fees.priority_fee
    return FeeBreakdown(
        transaction_fee_sol=fees.transaction_fee,
        transaction_fee_quote=transaction_fee_quote,
        platform_fee=fees.platform_fee,
        priority_fee=fees.priority_fee,
        total_fee_quote=total,
    )


def normalize(
    quote: AssetDelta,
    base: AssetDelta,
    direction: Union[TradeDirection, str],
    fees: FeeData,
    *,
    native_mint: str = SOL_MINT,
) -> Union[BuyAmounts, SellAmounts]:
    """Compute normalized amounts for one swap leg pair.

    The caller guarantees the sign orientation of the deltas for the given
    direction; only the direction value and fee signs are checked. Totals are
    exact whatever decimal context the caller has active.
    """

    trade_direction = coerce_direction(direction)
    if quote.net_delta == 0:
        logger.warning("Quote delta is zero mint=%s direction=%s", quote.mint, trade_direction.value)
    if base.net_delta == 0:
        logger.warning("Base delta is zero mint=%s direction=%s", base.mint, trade_direction.value)
    fee_breakdown = build_fee_breakdown(fees, quote.mint, native_mint=native_mint)
    base_amount = abs(base.net_delta)
    quote_amount = abs(quote.net_delta)
    with exact_context():
        if trade_direction is TradeDirection.BUY:
            return BuyAmounts(
                base_amount=base_amount,
                fee_breakdown=fee_breakdown,
                swap_input_amount=quote_amount,
                total_wallet_cost=Decimal(quote_amount) + fee_breakdown.total_fee_quote,
            )
        return SellAmounts(
            base_amount=base_amount,
            fee_breakdown=fee_breakdown,
            swap_output_amount=quote_amount,
            net_wallet_received=Decimal(quote_amount) - fee_breakdown.total_fee_quote,
        )


@dataclass(frozen=True)
class AmountNormalizer:
    """Stateless normalizer bound to a native mint; see :func:`normalize`."""

    native_mint: str = SOL_MINT

    def normalize(
        self,
        quote: AssetDelta,
        base: AssetDelta,
        direction: Union[TradeDirection, str],
        fees: FeeData,
    ) -> Union[BuyAmounts, SellAmounts]:
        return normalize(quote, base, direction, fees, native_mint=self.native_mint)
