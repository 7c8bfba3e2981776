"""Exceptions raised by the normalization pipeline."""
from __future__ import annotations


class SwapNormError(ValueError):
    """Base class for local validation failures."""


class InvalidDirection(SwapNormError):
    pass


class InvalidFeeData(SwapNormError):
    pass


class AssetNotFound(SwapNormError):
    pass


class IngestionError(SwapNormError):
    pass
