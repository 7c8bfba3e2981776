"""Separation of SOL rent refunds from economic balance changes.

Closing temporary token accounts during a swap credits the wallet with the
account's rent deposit. Those credits are small, positive and in SOL; left in
place they look like a quote leg and skew direction detection. They are kept
aside in ``rent_refunds`` rather than discarded.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import logging
from typing import Iterable, List, Protocol

from ..constants import RENT_NOISE_THRESHOLD_SOL, SOL_MINT
from ..types import FilteredBalanceChanges, TokenBalanceChange
from ..utils import exact_context

logger = logging.getLogger(__name__)


class BalanceChangeFilter(Protocol):
    def filter_rent_noise(
        self, balance_changes: Iterable[TokenBalanceChange], swapper: str
    ) -> FilteredBalanceChanges:
        ...


def has_non_sol_activity(changes: Iterable[TokenBalanceChange], *, native_mint: str = SOL_MINT) -> bool:
    return any(change.mint != native_mint and change.change_amount != 0 for change in changes)


def is_rent_noise(
    change: TokenBalanceChange,
    non_sol_activity: bool,
    *,
    native_mint: str = SOL_MINT,
    threshold: Decimal = RENT_NOISE_THRESHOLD_SOL,
) -> bool:
    if not non_sol_activity:
        return False
    if change.mint != native_mint or change.change_amount <= 0:
        return False
    with exact_context():
        return abs(change.ui_change_amount) < threshold


def filter_rent_noise(
    balance_changes: Iterable[TokenBalanceChange],
    swapper: str,
    *,
    native_mint: str = SOL_MINT,
    threshold: Decimal = RENT_NOISE_THRESHOLD_SOL,
) -> FilteredBalanceChanges:
    """Partition ``swapper``'s changes into economic changes and rent refunds.

    Records owned by other wallets are dropped. Input order is preserved in
    both outputs.
    """

    owned = [change for change in balance_changes if change.owner == swapper]
    non_sol_activity = has_non_sol_activity(owned, native_mint=native_mint)
    economic: List[TokenBalanceChange] = []
    refunds: List[TokenBalanceChange] = []
    for change in owned:
        if is_rent_noise(change, non_sol_activity, native_mint=native_mint, threshold=threshold):
            refunds.append(change)
        else:
            economic.append(change)
    logger.debug(
        "Rent filter swapper=%s owned=%d economic=%d rent_refunds=%d",
        swapper,
        len(owned),
        len(economic),
        len(refunds),
    )
    return FilteredBalanceChanges(economic_changes=tuple(economic), rent_refunds=tuple(refunds))


@dataclass(frozen=True)
class RentRefundFilter:
    """Stateless filter bound to a native mint and noise threshold."""

    native_mint: str = SOL_MINT
    threshold: Decimal = RENT_NOISE_THRESHOLD_SOL

    def filter_rent_noise(
        self, balance_changes: Iterable[TokenBalanceChange], swapper: str
    ) -> FilteredBalanceChanges:
        return filter_rent_noise(
            balance_changes, swapper, native_mint=self.native_mint, threshold=self.threshold
        )
