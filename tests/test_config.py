from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from schengen import (
    CalculationMode,
    ComplianceConfig,
    InvalidConfigError,
    InvalidReferenceDateError,
    RiskThresholds,
)
from schengen.config import Settings, get_settings


def test_settings_defaults():
    settings = Settings()
    assert settings.day_limit == 90
    assert settings.window_size_days == 180
    assert settings.compliance_start_date == date(2025, 10, 12)
    assert settings.risk_green_threshold == 30
    assert settings.risk_amber_threshold == 10
    assert settings.log_level == "INFO"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SCHENGEN_DAY_LIMIT", "60")
    monkeypatch.setenv("SCHENGEN_COMPLIANCE_START_DATE", "2025-01-01")
    monkeypatch.setenv("SCHENGEN_LOG_LEVEL", "debug")
    get_settings.cache_clear()

    settings = get_settings()
    assert settings.day_limit == 60
    assert settings.compliance_start_date == date(2025, 1, 1)
    assert settings.log_level == "DEBUG"

    cfg = ComplianceConfig(reference_date="2026-01-01")
    assert cfg.limit == 60
    assert cfg.compliance_start_date == date(2025, 1, 1)


def test_config_defaults_and_parsing():
    cfg = ComplianceConfig(reference_date="2026-03-01T10:00:00Z")
    assert cfg.reference_date == date(2026, 3, 1)
    assert cfg.mode == CalculationMode.audit
    assert cfg.limit == 90
    assert cfg.window_size_days == 180
    assert cfg.thresholds == RiskThresholds(green=30, amber=10)


def test_aware_reference_datetime_uses_utc_day():
    ref = datetime(2026, 3, 1, 23, 30, tzinfo=timezone.utc)
    assert ComplianceConfig(reference_date=ref).reference_date == date(2026, 3, 1)


@pytest.mark.parametrize(
    "overrides, key",
    [
        ({"limit": 0}, "limit"),
        ({"window_size_days": -1}, "window_size_days"),
        ({"limit": 200}, "limit"),
        ({"thresholds": {"green": 5, "amber": 10}}, "thresholds.amber"),
        ({"compliance_start_date": "soon"}, "compliance_start_date"),
    ],
)
def test_invalid_config(overrides, key):
    with pytest.raises(InvalidConfigError) as exc:
        ComplianceConfig(reference_date=date(2026, 1, 1), **overrides)
    assert exc.value.key == key


@pytest.mark.parametrize("value", [None, "", "tomorrow", 20260101])
def test_invalid_reference_date(value):
    with pytest.raises(InvalidReferenceDateError):
        ComplianceConfig(reference_date=value)


def test_config_is_frozen_and_rebased():
    cfg = ComplianceConfig(reference_date=date(2026, 1, 1), limit=60, thresholds={"green": 20, "amber": 5})
    moved = cfg.at("2026-02-01")
    assert moved.reference_date == date(2026, 2, 1)
    assert moved.limit == 60
    assert moved.thresholds == cfg.thresholds
    assert cfg.reference_date == date(2026, 1, 1)
    with pytest.raises(ValidationError):
        cfg.limit = 10
