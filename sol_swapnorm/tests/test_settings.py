from __future__ import annotations

from decimal import Decimal

from pydantic import ValidationError
import pytest

from sol_swapnorm.config import load_settings
from sol_swapnorm.constants import RENT_NOISE_THRESHOLD_SOL, SOL_MINT


def test_defaults(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    settings = load_settings()
    assert settings.native_mint == SOL_MINT
    assert settings.rent_noise_threshold_sol == RENT_NOISE_THRESHOLD_SOL
    assert settings.report_format == "csv"
    rent_filter = settings.rent_filter()
    assert rent_filter.threshold == Decimal("0.01")


def test_yaml_then_env_precedence(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    config = tmp_path / "config.yaml"
    config.write_text("rent_noise_threshold_sol: '0.005'\nlog_level: debug\nreport_format: parquet\n")
    settings = load_settings(config)
    assert settings.rent_noise_threshold_sol == Decimal("0.005")
    assert settings.log_level == "DEBUG"

    monkeypatch.setenv("SWAPNORM_REPORT_FORMAT", "both")
    settings = load_settings(config)
    assert settings.report_format == "both"

    settings = load_settings(config, {"report_format": "csv"})
    assert settings.report_format == "csv"


def test_threshold_must_be_positive(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ValidationError, match="rent_noise_threshold_sol"):
        load_settings(overrides={"rent_noise_threshold_sol": "0"})


def test_overrides_are_not_mutated(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    config = tmp_path / "config.yaml"
    config.write_text("log_level: info\n")
    overrides = {"report_format": "parquet"}
    settings = load_settings(config, overrides)
    assert overrides == {"report_format": "parquet"}
    assert settings.log_level == "INFO"


def test_components_share_native_mint(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SWAPNORM_NATIVE_MINT", "WrappedNative")
    settings = load_settings()
    assert settings.amount_normalizer().native_mint == "WrappedNative"
    assert settings.rent_filter().native_mint == "WrappedNative"
