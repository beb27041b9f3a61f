"""Planning questions: when can a stay start, and how long can it last.

A stay of N days may start on D when the days already used in the window
before D leave room for the whole stay: days_used(D) + N <= limit. Old
presence ages out of the window as D moves forward, so the forward search
always resolves within window_size_days + N days unless the stay is longer
than the limit, or planned presence keeps the window full.
"""
from __future__ import annotations

import logging
from collections.abc import Collection
from datetime import date

from schengen.errors import InvalidConfigError
from schengen.schemas.compliance import ComplianceConfig, ExpiringDay, SafeEntryResult
from schengen.services.dates import add_days, days_between
from schengen.services.vector import days_used_series
from schengen.services.window import coerce_reference_date, resolve_config

logger = logging.getLogger(__name__)


def _prepare(presence: Collection[date], on: date | str, config: ComplianceConfig | None):
    day = coerce_reference_date(on)
    cfg = resolve_config(day, config)
    if not isinstance(presence, frozenset):
        presence = frozenset(presence)
    return presence, day, cfg


def earliest_safe_entry(
    presence: Collection[date],
    desired_stay_length: int,
    from_date: date | str,
    config: ComplianceConfig | None = None,
) -> date | None:
    """First date on or after from_date where days_used + desired_stay_length <= limit.

    Returns from_date itself when it already qualifies, and None when no start date
    within window_size_days + desired_stay_length days does.
    """
    if not isinstance(desired_stay_length, int) or desired_stay_length < 1:
        raise InvalidConfigError("desired_stay_length", f"must be a positive integer, got {desired_stay_length!r}")
    presence, start, cfg = _prepare(presence, from_date, config)

    if desired_stay_length > cfg.limit:
        logger.debug("Stay of %d days can never fit a limit of %d", desired_stay_length, cfg.limit)
        return None

    horizon = cfg.window_size_days + desired_stay_length
    allowed = cfg.limit - desired_stay_length
    for offset, used in enumerate(days_used_series(presence, start, add_days(start, horizon), cfg)):
        if used <= allowed:
            return add_days(start, offset)

    logger.warning(
        "No safe entry for a %d-day stay within %d days of %s", desired_stay_length, horizon, start
    )
    return None


def days_until_compliant(
    presence: Collection[date],
    from_date: date | str,
    config: ComplianceConfig | None = None,
) -> int | None:
    """Days to wait before a one-day entry is safe: 0 when already safe, None if never within the horizon."""
    presence, start, cfg = _prepare(presence, from_date, config)
    safe = earliest_safe_entry(presence, 1, start, cfg)
    if safe is None:
        return None
    return days_between(safe, start)


def max_stay_days(
    presence: Collection[date],
    entry_date: date | str,
    config: ComplianceConfig | None = None,
) -> int:
    """limit - days_used on entry_date; 0 when entry that day is not safe."""
    presence, entry, cfg = _prepare(presence, entry_date, config)
    used = days_used_series(presence, entry, entry, cfg)[0]
    if used > cfg.limit - 1:
        return 0
    return cfg.limit - used


def max_rolling_stay_days(
    presence: Collection[date],
    entry_date: date | str,
    config: ComplianceConfig | None = None,
) -> int:
    """Longest stay from entry_date during which every stay day stays compliant.

    Unlike max_stay_days this lets old presence age out while the stay runs:
    stay day k is fine when days_used(entry + k), counting the k earlier stay
    days, is at most limit - 1. Never less than max_stay_days.
    """
    presence, entry, cfg = _prepare(presence, entry_date, config)
    length = cfg.limit
    base = days_used_series(presence, entry, add_days(entry, length - 1), cfg)
    floor = cfg.compliance_start_date

    added = 0
    for k in range(length):
        if base[k] + added > cfg.limit - 1:
            return k
        day = add_days(entry, k)
        if day >= floor and day not in presence:
            added += 1
    return length


def get_safe_entry_info(
    presence: Collection[date],
    from_date: date | str,
    config: ComplianceConfig | None = None,
) -> SafeEntryResult:
    presence, start, cfg = _prepare(presence, from_date, config)
    safe = earliest_safe_entry(presence, 1, start, cfg)
    used_now = days_used_series(presence, start, start, cfg)[0]

    if safe is None:
        return SafeEntryResult(
            can_enter_today=False,
            earliest_safe_date=None,
            days_until_compliant=None,
            days_used_on_entry=used_now,
        )
    used_on_entry = used_now if safe == start else days_used_series(presence, safe, safe, cfg)[0]
    return SafeEntryResult(
        can_enter_today=safe == start,
        earliest_safe_date=safe,
        days_until_compliant=days_between(safe, start),
        days_used_on_entry=used_on_entry,
    )


def project_expiring_days(
    presence: Collection[date],
    from_date: date | str,
    days: int,
    config: ComplianceConfig | None = None,
) -> list[ExpiringDay]:
    """Window counts for from_date and the following days, with how many days aged out each day."""
    if not isinstance(days, int) or days < 0:
        raise InvalidConfigError("days", f"must be a non-negative integer, got {days!r}")
    presence, start, cfg = _prepare(presence, from_date, config)
    series = days_used_series(presence, start, add_days(start, days), cfg)

    projection = []
    previous = series[0]
    for offset, used in enumerate(series):
        projection.append(
            ExpiringDay(
                day=add_days(start, offset),
                expiring_days=0 if offset == 0 else max(0, previous - used),
                days_used=used,
                days_remaining=cfg.limit - used,
            )
        )
        previous = used
    return projection
