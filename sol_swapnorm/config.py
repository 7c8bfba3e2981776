"""Configuration loading and validation."""
from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .constants import RENT_NOISE_THRESHOLD_SOL, SOL_MINT
from .filtering import RentRefundFilter
from .normalization import AmountNormalizer


class YAMLConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from a YAML configuration file."""

    def __init__(self, settings_cls: type[BaseSettings], config_path: Optional[Path]):
        super().__init__(settings_cls)
        self.config_path = config_path

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:  # pragma: no cover
        return None, field_name, False

    def __call__(self) -> Dict[str, Any]:
        if self.config_path is None or not self.config_path.exists():
            return {}
        data = yaml.safe_load(self.config_path.read_text())
        if not isinstance(data, dict):
            return {}
        return data


class AppSettings(BaseSettings):
    """Application configuration resolved from CLI/env/YAML."""

    model_config = SettingsConfigDict(env_prefix="SWAPNORM_", env_file=".env", extra="ignore")

    config_path: Optional[Path] = Field(default=None, exclude=True)

    native_mint: str = SOL_MINT
    rent_noise_threshold_sol: Decimal = RENT_NOISE_THRESHOLD_SOL
    log_level: str = "WARNING"
    outdir: Path = Path("./reports")
    report_format: Literal["csv", "parquet", "both", "xlsx"] = "csv"

    @field_validator("rent_noise_threshold_sol")
    @classmethod
    def _positive_threshold(cls, value: Decimal) -> Decimal:
        if value <= 0:
            raise ValueError("rent_noise_threshold_sol must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # ``init_settings`` exposes ``init_kwargs`` with the raw values passed
        init_kwargs = getattr(init_settings, "init_kwargs", {})  # type: ignore[attr-defined]
        config_path = init_kwargs.get("config_path")
        if config_path is not None:
            config_path = Path(config_path)
        yaml_source = YAMLConfigSettingsSource(settings_cls, config_path)
        # Precedence: CLI (init) > environment > .env > YAML > file secrets
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            yaml_source,
            file_secret_settings,
        )

    def rent_filter(self) -> RentRefundFilter:
        return RentRefundFilter(native_mint=self.native_mint, threshold=self.rent_noise_threshold_sol)

    def amount_normalizer(self) -> AmountNormalizer:
        return AmountNormalizer(native_mint=self.native_mint)


def load_settings(config_path: Optional[Path] = None, overrides: Optional[Dict[str, Any]] = None) -> AppSettings:
    overrides = dict(overrides or {})
    if config_path is not None:
        overrides.setdefault("config_path", config_path)
    return AppSettings(**overrides)
