"""Core pydantic data models used across the project."""
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import exact_context


def _to_decimal(value: Any) -> Any:
    if isinstance(value, float):
        return Decimal(str(value))
    if value is None:
        return Decimal("0")
    return value


class TradeDirection(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class TokenBalanceChange(BaseModel):
    """One observed balance delta for one token account in one transaction."""

    model_config = ConfigDict(frozen=True)

    address: str
    mint: str
    decimals: int = Field(ge=0)
    change_amount: int
    pre_balance: int = 0
    post_balance: int = 0
    owner: str
    symbol: Optional[str] = None
    name: Optional[str] = None

    @property
    def ui_change_amount(self) -> Decimal:
        """Change expressed in whole units of the asset."""
        with exact_context():
            return Decimal(self.change_amount).scaleb(-self.decimals)


class AssetDelta(BaseModel):
    """Aggregated net delta of one asset within a transaction."""

    model_config = ConfigDict(frozen=True)

    mint: str
    symbol: str
    net_delta: int
    decimals: int = Field(ge=0)
    is_intermediate: bool = False


class FeeData(BaseModel):
    """Raw fee inputs of a transaction, denominated in SOL."""

    model_config = ConfigDict(frozen=True)

    transaction_fee: Decimal = Decimal("0")
    priority_fee: Decimal = Decimal("0")
    platform_fee: Decimal = Decimal("0")

    @field_validator("transaction_fee", "priority_fee", "platform_fee", mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> Any:
        return _to_decimal(value)


class FeeBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    transaction_fee_sol: Decimal
    transaction_fee_quote: Decimal
    platform_fee: Decimal
    priority_fee: Decimal
    total_fee_quote: Decimal


class FilteredBalanceChanges(BaseModel):
    """Economic changes and rent refunds of a single wallet."""

    model_config = ConfigDict(frozen=True)

    economic_changes: tuple[TokenBalanceChange, ...] = ()
    rent_refunds: tuple[TokenBalanceChange, ...] = ()


class BuyAmounts(BaseModel):
    """Amounts of a BUY: quote spent plus fees."""

    model_config = ConfigDict(frozen=True)

    direction: Literal["BUY"] = "BUY"
    base_amount: int = Field(ge=0)
    fee_breakdown: FeeBreakdown
    swap_input_amount: int = Field(ge=0)
    total_wallet_cost: Decimal


class SellAmounts(BaseModel):
    """Amounts of a SELL: quote received minus fees."""

    model_config = ConfigDict(frozen=True)

    direction: Literal["SELL"] = "SELL"
    base_amount: int = Field(ge=0)
    fee_breakdown: FeeBreakdown
    swap_output_amount: int = Field(ge=0)
    net_wallet_received: Decimal


NormalizedAmount = Annotated[Union[BuyAmounts, SellAmounts], Field(discriminator="direction")]


class SwapTransaction(BaseModel):
    """Balance changes and fees of one swap transaction, scoped to its swapper."""

    model_config = ConfigDict(frozen=True)

    signature: str
    swapper: str
    token_balance_changes: tuple[TokenBalanceChange, ...] = ()
    fees: FeeData = Field(default_factory=FeeData)


class NormalizedSwap(BaseModel):
    model_config = ConfigDict(frozen=True)

    signature: str
    swapper: str
    direction: TradeDirection
    quote: AssetDelta
    base: AssetDelta
    amounts: NormalizedAmount
    rent_refunds_filtered: int = 0
    intermediate_assets: tuple[str, ...] = ()
