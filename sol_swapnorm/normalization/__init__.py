from .amounts import AmountNormalizer, SwapAmountNormalizer, build_fee_breakdown, normalize
from .deltas import collect_deltas

__all__ = [
    "AmountNormalizer",
    "SwapAmountNormalizer",
    "build_fee_breakdown",
    "collect_deltas",
    "normalize",
]
