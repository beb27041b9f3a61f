"""Fingerprint-keyed memoization for compliance results.

Keys come from the content of the trip set and the calculation parameters,
never from object identity, so two equal trip lists built separately share an
entry. Cached values are immutable results of pure computations: entries are
never revised, only evicted (bounded LRU). Dictionary operations run under a
lock; the computation itself runs outside it, so two threads racing on a new
key may both compute and the later write wins with an identical value.
"""
from __future__ import annotations

import hashlib
import logging
import threading
from collections import OrderedDict
from collections.abc import Callable, Iterable
from datetime import date
from typing import Any

from schengen.config import get_settings
from schengen.errors import InvalidConfigError
from schengen.schemas.compliance import CacheMetrics, ComplianceConfig, ComplianceResult
from schengen.services.dates import utc_today
from schengen.services.presence import TripLike, coerce_trips, presence_days
from schengen.services.registry import validate_country
from schengen.services.risk import get_risk_level
from schengen.services.safe_entry import earliest_safe_entry, max_stay_days
from schengen.services.vector import compute_compliance_vector, compute_month_compliance, compute_year_compliance
from schengen.services.window import coerce_reference_date, days_used_in_window

logger = logging.getLogger(__name__)


def trips_fingerprint(trips: Iterable[TripLike]) -> str:
    """Stable SHA-256 over the normalized trip tuples. Ids, purpose and order do not matter."""
    rows = set()
    for trip in coerce_trips(trips):
        country = validate_country(trip.country)
        code = country.normalized if country.valid else trip.country.upper()
        exit_key = trip.exit_date.isoformat() if trip.exit_date is not None else "open"
        rows.add((trip.entry_date.isoformat(), exit_key, code, trip.counts_toward_presence))
    payload = "|".join(",".join(map(str, row)) for row in sorted(rows))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def config_fingerprint(config: ComplianceConfig) -> str:
    # mode documents intent only; it does not change any number
    return ":".join(
        (
            config.reference_date.isoformat(),
            str(config.limit),
            str(config.window_size_days),
            config.compliance_start_date.isoformat(),
            f"{config.thresholds.green}/{config.thresholds.amber}",
        )
    )


class ComplianceCache:
    """Bounded LRU map from fingerprint key to an immutable computed value."""

    def __init__(self, max_entries: int | None = None):
        size = max_entries if max_entries is not None else get_settings().cache_max_entries
        if size < 1:
            raise InvalidConfigError("cache_max_entries", f"must be at least 1, got {size}")
        self.max_entries = size
        self._entries: OrderedDict[str, Any] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._presence_computations = 0

    def get_or_compute(self, key: str, compute: Callable[[], Any]) -> Any:
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
                self._hits += 1
                logger.debug("Cache hit %s", key[:48])
                return self._entries[key]
            self._misses += 1
        logger.debug("Cache miss %s", key[:48])

        value = compute()

        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted cache entry %s", evicted[:16])
        return value

    def record_presence_computation(self) -> None:
        with self._lock:
            self._presence_computations += 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def metrics(self) -> CacheMetrics:
        with self._lock:
            return CacheMetrics(
                hits=self._hits,
                misses=self._misses,
                presence_computations=self._presence_computations,
                size=len(self._entries),
            )

    def clear_metrics(self) -> None:
        with self._lock:
            self._hits = 0
            self._misses = 0
            self._presence_computations = 0


_default_cache: ComplianceCache | None = None
_default_lock = threading.Lock()


def get_default_cache() -> ComplianceCache:
    global _default_cache
    with _default_lock:
        if _default_cache is None:
            _default_cache = ComplianceCache()
        return _default_cache


def get_cached_compliance(key: str, compute: Callable[[], Any]) -> Any:
    return get_default_cache().get_or_compute(key, compute)


def get_metrics() -> CacheMetrics:
    return get_default_cache().metrics()


def clear_metrics() -> None:
    get_default_cache().clear_metrics()


def clear_cache() -> None:
    get_default_cache().clear()


def build_result(presence: frozenset[date], config: ComplianceConfig) -> ComplianceResult:
    used = days_used_in_window(presence, config.reference_date, config)
    remaining = config.limit - used
    return ComplianceResult(
        reference_date=config.reference_date,
        days_used=used,
        days_remaining=remaining,
        risk_level=get_risk_level(remaining, config.thresholds),
        is_compliant=used <= config.limit - 1,
    )


class ComplianceCalculator:
    """Compliance queries for one subject's trips, memoized on the shared cache.

    Presence days are expanded once per trip-set fingerprint and compliance
    start date; every query after that reuses them. When a trip has no exit
    date the expansion also depends on the reference date: evaluate() expands
    for the date it is asked about, every other query for config.reference_date.
    """

    def __init__(self, trips: Iterable[TripLike], config: ComplianceConfig, cache: ComplianceCache | None = None):
        self.trips = tuple(coerce_trips(trips))
        self.config = config
        self.cache = cache if cache is not None else get_default_cache()
        self.fingerprint = trips_fingerprint(self.trips)
        self.open_ended = any(trip.is_open_ended for trip in self.trips)

    @property
    def presence(self) -> frozenset[date]:
        return self._presence_for(self.config)

    def _presence_for(self, config: ComplianceConfig) -> frozenset[date]:
        key = f"presence:{self.fingerprint}:{config.compliance_start_date.isoformat()}"
        if self.open_ended:
            key += f":{config.reference_date.isoformat()}"
        return self.cache.get_or_compute(key, lambda: self._expand(config))

    def _expand(self, config: ComplianceConfig) -> frozenset[date]:
        self.cache.record_presence_computation()
        logger.debug("Expanding presence for trips %s", self.fingerprint[:16])
        return presence_days(self.trips, config)

    def evaluate(self, reference_date: date | str | None = None) -> ComplianceResult:
        cfg = self.config if reference_date is None else self.config.at(coerce_reference_date(reference_date))
        key = f"result:{self.fingerprint}:{config_fingerprint(cfg)}"
        return self.cache.get_or_compute(key, lambda: build_result(self._presence_for(cfg), cfg))

    def vector(self, start_date: date | str, end_date: date | str) -> list[ComplianceResult]:
        start = coerce_reference_date(start_date)
        end = coerce_reference_date(end_date)
        key = f"vector:{self.fingerprint}:{config_fingerprint(self.config)}:{start}:{end}"
        return list(self.cache.get_or_compute(
            key, lambda: tuple(compute_compliance_vector(self.presence, start, end, self.config))
        ))

    def month(self, year: int, month: int) -> list[ComplianceResult]:
        key = f"month:{self.fingerprint}:{config_fingerprint(self.config)}:{year}-{month}"
        return list(self.cache.get_or_compute(
            key, lambda: tuple(compute_month_compliance(self.presence, year, month, self.config))
        ))

    def year(self, year: int) -> list[ComplianceResult]:
        key = f"year:{self.fingerprint}:{config_fingerprint(self.config)}:{year}"
        return list(self.cache.get_or_compute(
            key, lambda: tuple(compute_year_compliance(self.presence, year, self.config))
        ))

    def earliest_safe_entry(self, desired_stay_length: int, from_date: date | str | None = None) -> date | None:
        start = coerce_reference_date(from_date) if from_date is not None else self.config.reference_date
        return earliest_safe_entry(self.presence, desired_stay_length, start, self.config)

    def max_stay_days(self, entry_date: date | str) -> int:
        return max_stay_days(self.presence, entry_date, self.config)


def create_compliance_calculator(
    trips: Iterable[TripLike],
    config: ComplianceConfig | None = None,
    cache: ComplianceCache | None = None,
) -> ComplianceCalculator:
    cfg = config if config is not None else ComplianceConfig(reference_date=utc_today())
    return ComplianceCalculator(trips, cfg, cache)
