"""Batch evaluation of daily compliance across a date range.

Moving the reference date forward by one day shifts the window by one day:
the old reference date enters at the trailing end and the day that is now
window_size_days behind leaves. A running counter updated by those two
membership checks gives the whole range in O(range + window) instead of
recounting the window for every day.
"""
from __future__ import annotations

import logging
from collections.abc import Collection
from datetime import date

from schengen.errors import InvalidReferenceDateError
from schengen.schemas.compliance import ComplianceConfig, ComplianceResult
from schengen.services.dates import add_days, month_bounds
from schengen.services.risk import get_risk_level
from schengen.services.window import coerce_reference_date, days_used_in_window, resolve_config

logger = logging.getLogger(__name__)


def days_used_series(
    presence: Collection[date],
    start_date: date | str,
    end_date: date | str,
    config: ComplianceConfig | None = None,
) -> list[int]:
    """Days used for every reference date from start_date to end_date inclusive."""
    start = coerce_reference_date(start_date)
    end = coerce_reference_date(end_date)
    if start > end:
        raise InvalidReferenceDateError(start_date, f"start date {start} is after end date {end}")

    cfg = resolve_config(start, config)
    if not isinstance(presence, (set, frozenset)):
        presence = frozenset(presence)
    floor = cfg.compliance_start_date
    window = cfg.window_size_days

    count = days_used_in_window(presence, start, cfg)
    series = [count]
    ref = start
    while ref < end:
        # ref -> ref + 1: ref enters the window, ref - window leaves it
        entering = ref
        leaving = add_days(ref, -window)
        if entering >= floor and entering in presence:
            count += 1
        if leaving >= floor and leaving in presence:
            count -= 1
        ref = add_days(ref, 1)
        series.append(count)

    logger.debug("Computed %d daily window counts from %s to %s", len(series), start, end)
    return series


def compute_compliance_vector(
    presence: Collection[date],
    start_date: date | str,
    end_date: date | str,
    config: ComplianceConfig | None = None,
) -> list[ComplianceResult]:
    start = coerce_reference_date(start_date)
    cfg = resolve_config(start, config)
    limit = cfg.limit
    thresholds = cfg.thresholds

    results = []
    for offset, used in enumerate(days_used_series(presence, start, end_date, cfg)):
        remaining = limit - used
        results.append(
            ComplianceResult(
                reference_date=add_days(start, offset),
                days_used=used,
                days_remaining=remaining,
                risk_level=get_risk_level(remaining, thresholds),
                is_compliant=used <= limit - 1,
            )
        )
    return results


def compute_month_compliance(
    presence: Collection[date],
    year: int,
    month: int,
    config: ComplianceConfig | None = None,
) -> list[ComplianceResult]:
    """One entry per day of the month (1-12)."""
    try:
        first, last = month_bounds(year, month)
    except (TypeError, ValueError) as e:
        raise InvalidReferenceDateError((year, month), f"invalid month ({e})") from e
    return compute_compliance_vector(presence, first, last, config)


def compute_year_compliance(
    presence: Collection[date],
    year: int,
    config: ComplianceConfig | None = None,
) -> list[ComplianceResult]:
    try:
        first, last = date(year, 1, 1), date(year, 12, 31)
    except (TypeError, ValueError) as e:
        raise InvalidReferenceDateError(year, f"invalid year ({e})") from e
    return compute_compliance_vector(presence, first, last, config)
