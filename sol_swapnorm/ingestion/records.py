"""Parsing of cached transaction payloads into typed records."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
import logging
from pathlib import Path
from typing import Any, List, Optional

from pydantic import ValidationError

from .. import utils
from ..errors import IngestionError
from ..types import FeeData, SwapTransaction, TokenBalanceChange

logger = logging.getLogger(__name__)


def _raw_int(payload: dict, key: str) -> int:
    """Read a raw smallest-unit amount, refusing anything non-integral."""

    value = payload.get(key, 0)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    elif isinstance(value, float) and value.is_integer():
        return int(value)
    elif isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        return int(value)
    raise IngestionError(f"{key} must be an integer number of raw units, got {value!r}")


def _sol_decimal(value: Any, key: str) -> Decimal:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise IngestionError(f"{key} is not a decimal amount: {value!r}") from None
    if not amount.is_finite():
        raise IngestionError(f"{key} is not a decimal amount: {value!r}")
    return amount


def _require_mapping(payload: Any, what: str) -> dict:
    if not isinstance(payload, dict):
        raise IngestionError(f"Expected a {what} object, got {type(payload).__name__}")
    return payload


def parse_balance_change(payload: dict) -> TokenBalanceChange:
    payload = _require_mapping(payload, "balance change")
    try:
        return TokenBalanceChange(
            address=payload.get("address") or payload.get("account") or "",
            mint=payload["mint"],
            decimals=_raw_int(payload, "decimals"),
            change_amount=_raw_int(payload, "change_amount"),
            pre_balance=_raw_int(payload, "pre_balance"),
            post_balance=_raw_int(payload, "post_balance"),
            owner=payload["owner"],
            symbol=payload.get("symbol"),
            name=payload.get("name"),
        )
    except (KeyError, TypeError, ValidationError) as exc:
        raise IngestionError(f"Malformed balance change: {payload!r}") from exc


def parse_fees(payload: dict) -> FeeData:
    """Read fee fields; ``fee``/``fee_lamports`` are lamports, the rest SOL."""

    payload = _require_mapping(payload, "transaction")
    transaction_fee = Decimal("0")
    for key in ("fee_lamports", "fee"):
        if key in payload:
            lamports = _sol_decimal(payload[key], key)
            transaction_fee = utils.lamports_to_sol(lamports)
            break
    else:
        if "fee_sol" in payload:
            transaction_fee = _sol_decimal(payload["fee_sol"], "fee_sol")
    priority_fee = _sol_decimal(payload.get("priority_fee") or 0, "priority_fee")
    platform_fee = _sol_decimal(payload.get("platform_fee") or 0, "platform_fee")
    return FeeData(
        transaction_fee=transaction_fee,
        priority_fee=priority_fee,
        platform_fee=platform_fee,
    )


def parse_transaction(payload: dict, swapper: Optional[str] = None) -> SwapTransaction:
    payload = _require_mapping(payload, "transaction")
    signature = payload.get("signature") or payload.get("id") or "unknown"
    wallet = swapper or payload.get("swapper") or payload.get("fee_payer") or payload.get("feePayer")
    if not wallet:
        raise IngestionError(f"No swapper for transaction {signature}")
    raw_changes = payload.get("token_balance_changes") or []
    if not isinstance(raw_changes, list):
        raise IngestionError(f"token_balance_changes of {signature} must be a list")
    changes = tuple(parse_balance_change(item) for item in raw_changes)
    fees = parse_fees(payload)
    try:
        return SwapTransaction(signature=signature, swapper=wallet, token_balance_changes=changes, fees=fees)
    except ValidationError as exc:
        raise IngestionError(f"Malformed transaction {signature!r}") from exc


def load_transactions(path: Path, swapper: Optional[str] = None) -> List[SwapTransaction]:
    """Load ``.jsonl`` (one transaction per line) or ``.json`` files."""

    if not path.exists():
        raise IngestionError(f"Transaction file not found: {path}")
    if path.suffix == ".jsonl":
        try:
            items: Any = list(utils.read_jsonl(path))
        except ValueError as exc:
            raise IngestionError(f"Invalid JSON line in {path}: {exc}") from exc
    else:
        try:
            items = utils.json_loads(path.read_bytes())
        except ValueError as exc:
            raise IngestionError(f"Invalid JSON in {path}: {exc}") from exc
        if isinstance(items, dict):
            items = [items]
    if not isinstance(items, list):
        raise IngestionError(f"Expected a transaction object or list in {path}")
    txs = [parse_transaction(item, swapper) for item in items]
    logger.debug("Loaded %d transactions from %s", len(txs), path)
    return txs
