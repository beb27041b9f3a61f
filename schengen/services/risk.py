"""Risk classification over days remaining (and days used, for dashboard badges)."""
from __future__ import annotations

from collections.abc import Mapping

from schengen.config import get_settings
from schengen.errors import InvalidConfigError
from schengen.models.compliance import RiskLevel
from schengen.schemas.compliance import RiskThresholds, StatusThresholds

_DESCRIPTIONS = {
    RiskLevel.green: "Low risk - plenty of days remaining",
    RiskLevel.amber: "Moderate risk - approaching limit",
    RiskLevel.red: "High risk - at or over limit",
    RiskLevel.breach: "Limit reached - no days remaining",
}


def _risk_thresholds(thresholds: RiskThresholds | Mapping | None) -> RiskThresholds:
    if thresholds is None:
        return RiskThresholds()
    if isinstance(thresholds, RiskThresholds):
        return thresholds
    if isinstance(thresholds, Mapping):
        return RiskThresholds(**thresholds)
    raise InvalidConfigError("thresholds", f"expected RiskThresholds or mapping, got {type(thresholds).__name__}")


def _status_thresholds(thresholds: StatusThresholds | Mapping | None) -> StatusThresholds:
    if thresholds is None:
        return StatusThresholds()
    if isinstance(thresholds, StatusThresholds):
        return thresholds
    if isinstance(thresholds, Mapping):
        return StatusThresholds(**thresholds)
    raise InvalidConfigError(
        "status_thresholds", f"expected StatusThresholds or mapping, got {type(thresholds).__name__}"
    )


def get_risk_level(days_remaining: int, thresholds: RiskThresholds | Mapping | None = None) -> RiskLevel:
    """green at or above the green cut, amber at or above the amber cut, red below (including negative)."""
    t = _risk_thresholds(thresholds)
    if days_remaining >= t.green:
        return RiskLevel.green
    if days_remaining >= t.amber:
        return RiskLevel.amber
    return RiskLevel.red


def get_display_status(days_remaining: int, thresholds: RiskThresholds | Mapping | None = None) -> RiskLevel:
    """Risk level with breach layered on top for zero or negative days remaining."""
    if days_remaining <= 0:
        return RiskLevel.breach
    return get_risk_level(days_remaining, thresholds)


def get_status_from_days_used(
    days_used: int,
    thresholds: StatusThresholds | Mapping | None = None,
    limit: int | None = None,
) -> RiskLevel:
    t = _status_thresholds(thresholds)
    limit = limit if limit is not None else get_settings().day_limit
    # At or over the limit is always a breach, whatever the badge thresholds say
    if days_used >= limit or days_used > t.red_max:
        return RiskLevel.breach
    if days_used <= t.green_max:
        return RiskLevel.green
    if days_used <= t.amber_max:
        return RiskLevel.amber
    return RiskLevel.red


def get_risk_description(level: RiskLevel) -> str:
    return _DESCRIPTIONS[RiskLevel(level)]


def get_risk_action(level: RiskLevel, days_remaining: int) -> str:
    level = RiskLevel(level)
    if level == RiskLevel.green:
        return "Travel planning can proceed normally."
    if level == RiskLevel.amber:
        return "Plan upcoming travel carefully. Consider spreading out Schengen visits."
    if days_remaining < 0:
        over = abs(days_remaining)
        return (
            f"Over limit by {over} day{'' if over == 1 else 's'}. "
            "Employee must remain outside Schengen until compliant."
        )
    if level == RiskLevel.breach:
        return "No days remaining. Employee must not enter Schengen until days expire."
    return "Limit nearly reached. Avoid new Schengen travel unless absolutely necessary."


def get_severity_score(
    days_remaining: int,
    thresholds: RiskThresholds | Mapping | None = None,
    limit: int | None = None,
) -> int:
    """Sort key for prioritising: 0-33 green, 34-66 amber, 67-100 red, above 100 when over the limit."""
    t = _risk_thresholds(thresholds)
    limit = limit if limit is not None else get_settings().day_limit

    if days_remaining < 0:
        return 100 + abs(days_remaining)
    if days_remaining < t.amber:
        position = t.amber - days_remaining
        return 67 + round(position / t.amber * 33)
    if days_remaining < t.green:
        position = t.green - days_remaining
        return 34 + round(position / (t.green - t.amber) * 32)

    green_range = limit - t.green
    if green_range <= 0:
        return 0
    position = min(days_remaining, limit) - t.green
    return max(0, 33 - round(position / green_range * 33))
