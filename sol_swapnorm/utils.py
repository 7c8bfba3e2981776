"""Utility helpers shared across modules."""
from __future__ import annotations

from contextlib import contextmanager
from decimal import Decimal, localcontext
from pathlib import Path
from typing import Any, Iterator

import orjson

from .constants import LAMPORTS_PER_SOL

# u64 raw amounts plus 9 dp SOL fees need about 30 digits
EXACT_PRECISION = 80


@contextmanager
def exact_context() -> Iterator[None]:
    """Run amount arithmetic independently of the caller's decimal context."""

    with localcontext() as ctx:
        ctx.prec = EXACT_PRECISION
        yield


def json_loads(data: str | bytes) -> Any:
    return orjson.loads(data)


def read_jsonl(path: Path) -> Iterator[Any]:
    with path.open("r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line:
                continue
            yield json_loads(line)


def lamports_to_sol(value: int | float | str | Decimal) -> Decimal:
    with exact_context():
        return (Decimal(str(value)) / LAMPORTS_PER_SOL).quantize(Decimal("0.000000001"))
