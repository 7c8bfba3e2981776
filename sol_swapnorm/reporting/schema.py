"""Column schemas for report outputs."""
from __future__ import annotations

NORMALIZED_SWAP_COLUMNS = [
    "signature",
    "swapper",
    "direction",
    "quote_mint",
    "quote_symbol",
    "base_mint",
    "base_symbol",
    "base_amount",
    "swap_input_amount",
    "total_wallet_cost",
    "swap_output_amount",
    "net_wallet_received",
    "transaction_fee_sol",
    "transaction_fee_quote",
    "platform_fee",
    "priority_fee",
    "total_fee_quote",
    "rent_refunds_filtered",
    "intermediate_assets",
]

BALANCE_CHANGE_COLUMNS = [
    "signature",
    "classification",
    "address",
    "mint",
    "owner",
    "decimals",
    "change_amount",
    "ui_change_amount",
]
