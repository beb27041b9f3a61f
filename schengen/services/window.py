"""Rolling-window aggregation.

For a reference date R the window is [R - window_size_days, R - 1]: it looks
back over the preceding days and never includes R itself. Days before the
compliance start date never count, even inside the window.
"""
from __future__ import annotations

from collections.abc import Collection
from datetime import date

from schengen.config import get_settings
from schengen.errors import InvalidReferenceDateError
from schengen.schemas.compliance import ComplianceConfig, WindowBounds
from schengen.services.dates import add_days, iter_days, parse_calendar_date


def coerce_reference_date(value: date | str) -> date:
    if value is None:
        raise InvalidReferenceDateError(value, "reference date is required")
    try:
        return parse_calendar_date(value)
    except ValueError as e:
        raise InvalidReferenceDateError(value, str(e)) from e


def resolve_config(reference_date: date, config: ComplianceConfig | None) -> ComplianceConfig:
    # Only the parameters of a passed config are used; the explicit reference date wins
    return config if config is not None else ComplianceConfig(reference_date=reference_date)


def get_window_bounds(
    reference_date: date | str,
    window_size_days: int | None = None,
    compliance_start_date: date | None = None,
) -> WindowBounds:
    """Inclusive bounds of the window for reference_date, optionally clamped to the start date.

    window_size_days defaults to Settings.window_size_days.
    """
    ref = coerce_reference_date(reference_date)
    if window_size_days is None:
        window_size_days = get_settings().window_size_days
    start = add_days(ref, -window_size_days)
    end = add_days(ref, -1)
    if compliance_start_date is not None and start < compliance_start_date:
        start = compliance_start_date
    return WindowBounds(start, end)


def is_in_window(day: date, reference_date: date | str, window_size_days: int | None = None) -> bool:
    start, end = get_window_bounds(reference_date, window_size_days)
    return start <= day <= end


def days_used_in_window(
    presence: Collection[date],
    reference_date: date | str,
    config: ComplianceConfig | None = None,
) -> int:
    ref = coerce_reference_date(reference_date)
    cfg = resolve_config(ref, config)
    start, end = get_window_bounds(ref, cfg.window_size_days, cfg.compliance_start_date)
    if end < start:
        return 0

    # a repeated day in list input is still one day
    if not isinstance(presence, (set, frozenset)):
        presence = frozenset(presence)
    span = (end - start).days + 1
    if len(presence) <= span:
        return sum(1 for d in presence if start <= d <= end)
    return sum(1 for d in iter_days(start, end) if d in presence)


def calculate_days_remaining(
    presence: Collection[date],
    reference_date: date | str,
    config: ComplianceConfig | None = None,
) -> int:
    """limit - days used. Negative when over the limit; never clamped."""
    ref = coerce_reference_date(reference_date)
    cfg = resolve_config(ref, config)
    return cfg.limit - days_used_in_window(presence, ref, cfg)


def is_compliant(
    presence: Collection[date],
    reference_date: date | str,
    config: ComplianceConfig | None = None,
) -> bool:
    """89 used is compliant; 90 (the limit) is already a breach."""
    ref = coerce_reference_date(reference_date)
    cfg = resolve_config(ref, config)
    return days_used_in_window(presence, ref, cfg) <= cfg.limit - 1


def can_safely_enter(
    presence: Collection[date],
    reference_date: date | str,
    config: ComplianceConfig | None = None,
) -> bool:
    """Whether a one-day entry on reference_date stays within the limit."""
    return is_compliant(presence, reference_date, config)
