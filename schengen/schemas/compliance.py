"""Calculation parameters and results."""
from __future__ import annotations

from datetime import date
from typing import NamedTuple

from pydantic import BaseModel, Field, field_validator, model_validator

from schengen.config import get_settings
from schengen.errors import InvalidConfigError, InvalidReferenceDateError
from schengen.models.compliance import CalculationMode, RiskLevel
from schengen.services.dates import parse_calendar_date, utc_today


class RiskThresholds(BaseModel):
    """Cut points over days remaining: >= green is green, >= amber is amber, else red."""

    model_config = {"frozen": True}

    green: int = Field(default_factory=lambda: get_settings().risk_green_threshold)
    amber: int = Field(default_factory=lambda: get_settings().risk_amber_threshold)

    @model_validator(mode="after")
    def check_order(self):
        if self.green < 0:
            raise InvalidConfigError("thresholds.green", "green threshold cannot be negative")
        if self.amber < 0:
            raise InvalidConfigError("thresholds.amber", "amber threshold cannot be negative")
        if self.amber >= self.green:
            raise InvalidConfigError(
                "thresholds.amber",
                f"amber threshold ({self.amber}) must be less than green threshold ({self.green})",
            )
        return self


class StatusThresholds(BaseModel):
    """Cut points over days used, for dashboard badges. Anything above red_max is a breach."""

    model_config = {"frozen": True}

    green_max: int = Field(default_factory=lambda: get_settings().status_green_max)
    amber_max: int = Field(default_factory=lambda: get_settings().status_amber_max)
    red_max: int = Field(default_factory=lambda: get_settings().status_red_max)

    @model_validator(mode="after")
    def check_order(self):
        if self.green_max < 0:
            raise InvalidConfigError("status_thresholds.green_max", "cannot be negative")
        if not self.green_max < self.amber_max < self.red_max:
            raise InvalidConfigError(
                "status_thresholds",
                f"expected green_max < amber_max < red_max, got {self.green_max}/{self.amber_max}/{self.red_max}",
            )
        return self


class ComplianceConfig(BaseModel):
    """Per-calculation parameters. Build a new one per calculation; instances are frozen."""

    model_config = {"frozen": True}

    reference_date: date
    mode: CalculationMode = CalculationMode.audit
    limit: int = Field(default_factory=lambda: get_settings().day_limit)
    window_size_days: int = Field(default_factory=lambda: get_settings().window_size_days)
    compliance_start_date: date = Field(default_factory=lambda: get_settings().compliance_start_date)
    thresholds: RiskThresholds = Field(default_factory=RiskThresholds)

    @field_validator("reference_date", mode="before")
    @classmethod
    def parse_reference_date(cls, v):
        if v is None:
            raise InvalidReferenceDateError(v, "reference date is required")
        try:
            return parse_calendar_date(v)
        except ValueError as e:
            raise InvalidReferenceDateError(v, str(e)) from e

    @field_validator("compliance_start_date", mode="before")
    @classmethod
    def parse_start_date(cls, v):
        try:
            return parse_calendar_date(v)
        except ValueError as e:
            raise InvalidConfigError("compliance_start_date", str(e)) from e

    @model_validator(mode="after")
    def check_limits(self):
        if self.limit <= 0:
            raise InvalidConfigError("limit", f"must be positive, got {self.limit}")
        if self.window_size_days <= 0:
            raise InvalidConfigError("window_size_days", f"must be positive, got {self.window_size_days}")
        if self.limit > self.window_size_days:
            raise InvalidConfigError(
                "limit", f"limit ({self.limit}) cannot exceed the window size ({self.window_size_days})"
            )
        return self

    @classmethod
    def for_today(cls, **overrides) -> "ComplianceConfig":
        """Config pinned to the current UTC calendar day."""
        return cls(reference_date=utc_today(), **overrides)

    def at(self, reference_date: date | str) -> "ComplianceConfig":
        """Same parameters, different reference date."""
        return type(self)(**{**self.model_dump(), "thresholds": self.thresholds, "reference_date": reference_date})


class ComplianceResult(BaseModel):
    model_config = {"frozen": True}

    reference_date: date
    days_used: int
    days_remaining: int  # signed; negative means over the limit
    risk_level: RiskLevel
    is_compliant: bool


class SafeEntryResult(BaseModel):
    model_config = {"frozen": True}

    can_enter_today: bool
    earliest_safe_date: date | None
    days_until_compliant: int | None
    days_used_on_entry: int


class ExpiringDay(BaseModel):
    model_config = {"frozen": True}

    day: date
    expiring_days: int
    days_used: int
    days_remaining: int


class WindowBounds(NamedTuple):
    start: date
    end: date


class CacheMetrics(BaseModel):
    hits: int = 0
    misses: int = 0
    presence_computations: int = 0
    size: int = 0
