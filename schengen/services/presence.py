"""Expand trips into the set of distinct presence days."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date

from pydantic import ValidationError

from schengen.config import get_settings
from schengen.errors import InvalidDateRangeError, InvalidTripError, UnknownCountryError
from schengen.schemas.compliance import ComplianceConfig
from schengen.schemas.trip import Trip
from schengen.services.dates import iter_days, parse_calendar_date
from schengen.services.registry import validate_country

logger = logging.getLogger(__name__)

TripLike = Trip | Mapping


def coerce_trip(trip: TripLike) -> Trip:
    """Accept a Trip or a mapping in the data-layer record shape."""
    if isinstance(trip, Trip):
        return trip
    if not isinstance(trip, Mapping):
        raise InvalidTripError("trip", trip, f"expected a Trip or mapping, got {type(trip).__name__}")
    try:
        return Trip.model_validate(dict(trip))
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first.get("loc", ())) or "trip"
        raise InvalidTripError(field, first.get("input"), first.get("msg", "invalid value")) from e


def coerce_trips(trips: Iterable[TripLike]) -> list[Trip]:
    return [coerce_trip(t) for t in trips]


def presence_days(trips: Iterable[TripLike], config: ComplianceConfig | None = None) -> frozenset[date]:
    """Every distinct day spent in Schengen territory on or after the compliance start date.

    Private and ghosted trips are skipped before anything else. A country that is
    known but outside Schengen (IE, GB, US...) contributes nothing; an unknown
    country raises UnknownCountryError instead of being treated as "no travel".
    Overlapping trips count each day once. A trip with no exit date runs through
    the config's reference date, so it needs a config.
    """
    floor = config.compliance_start_date if config is not None else get_settings().compliance_start_date
    days: set[date] = set()
    counted = 0

    for raw in trips:
        trip = coerce_trip(raw)
        if not trip.counts_toward_presence:
            continue

        country = validate_country(trip.country)
        if not country.valid:
            raise UnknownCountryError(trip.country)
        if not country.is_schengen:
            continue

        if trip.is_open_ended:
            if config is None:
                raise InvalidTripError("exit_date", None, "a trip with no exit date needs a reference date")
            end = config.reference_date
        else:
            end = trip.exit_date
        if end < floor:
            continue
        start = max(trip.entry_date, floor)
        if end < start:
            # still open but entered after the reference date
            continue
        days.update(iter_days(start, end))
        counted += 1

    logger.debug("Expanded %d counted trip(s) into %d presence day(s) (floor %s)", counted, len(days), floor)
    return frozenset(days)


def sorted_presence(presence: Iterable[date]) -> list[date]:
    return sorted(presence)


def presence_bounds(presence: Iterable[date]) -> tuple[date, date] | None:
    """(earliest, latest) presence day, or None when there is no presence."""
    ordered = sorted(presence)
    if not ordered:
        return None
    return ordered[0], ordered[-1]


def count_travel_days(entry_date: date | str, exit_date: date | str) -> int:
    """Inclusive day count of a raw interval: same-day trips count as 1."""
    parsed = {}
    for field, value in (("entry_date", entry_date), ("exit_date", exit_date)):
        try:
            parsed[field] = parse_calendar_date(value)
        except ValueError as e:
            raise InvalidDateRangeError(field, value, f"unparseable date ({e})") from e
    if parsed["exit_date"] < parsed["entry_date"]:
        raise InvalidDateRangeError("dates", (entry_date, exit_date), "exit is before entry")
    return (parsed["exit_date"] - parsed["entry_date"]).days + 1
