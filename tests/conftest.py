"""Shared fixtures: trip and config factories, and a clean cache per test."""
import os
import sys
from datetime import date

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from schengen import ComplianceConfig, Trip, clear_cache, clear_metrics  # noqa: E402
from schengen.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def reset_cache():
    clear_cache()
    clear_metrics()
    yield
    clear_cache()
    clear_metrics()


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    # Environment overrides on the test machine must not leak into expected numbers
    for key in list(os.environ):
        if key.startswith("SCHENGEN_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_trip():
    def _make(entry, exit=None, country="FR", **kwargs):
        return Trip(entry_date=entry, exit_date=exit if exit is not None else entry, country=country, **kwargs)

    return _make


@pytest.fixture
def make_config():
    def _make(reference_date, **overrides):
        overrides.setdefault("compliance_start_date", date(2025, 10, 12))
        return ComplianceConfig(reference_date=reference_date, **overrides)

    return _make
