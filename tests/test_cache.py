import threading
from datetime import date

import pytest

from schengen import (
    ComplianceCache,
    InvalidConfigError,
    Trip,
    config_fingerprint,
    create_compliance_calculator,
    get_cached_compliance,
    get_metrics,
    trips_fingerprint,
)
from schengen.models import CalculationMode


def test_trips_fingerprint_ignores_order_ids_and_purpose(make_trip):
    a = make_trip(date(2025, 11, 1), date(2025, 11, 5), "FR", id="1", purpose="audit")
    b = make_trip(date(2025, 12, 1), date(2025, 12, 2), "DE", id="2")
    c = make_trip(date(2025, 11, 1), date(2025, 11, 5), "france", id="99", purpose="conference")
    assert trips_fingerprint([a, b]) == trips_fingerprint([b, c])
    assert trips_fingerprint([a, b]) == trips_fingerprint([b, a, a])


def test_trips_fingerprint_sensitive_to_content(make_trip):
    base = make_trip(date(2025, 11, 1), date(2025, 11, 5))
    assert trips_fingerprint([base]) != trips_fingerprint([make_trip(date(2025, 11, 1), date(2025, 11, 6))])
    assert trips_fingerprint([base]) != trips_fingerprint([make_trip(date(2025, 11, 1), date(2025, 11, 5), "DE")])
    assert trips_fingerprint([base]) != trips_fingerprint(
        [make_trip(date(2025, 11, 1), date(2025, 11, 5), is_private=True)]
    )


def test_trips_fingerprint_tolerates_unknown_country(make_trip):
    fingerprint = trips_fingerprint([make_trip(date(2025, 11, 1), country="Atlantis")])
    assert len(fingerprint) == 64


def test_config_fingerprint(make_config):
    cfg = make_config(date(2026, 1, 1))
    assert config_fingerprint(cfg) == config_fingerprint(cfg.model_copy(update={"mode": CalculationMode.planning}))
    assert config_fingerprint(cfg) != config_fingerprint(make_config(date(2026, 1, 2)))
    assert config_fingerprint(cfg) != config_fingerprint(make_config(date(2026, 1, 1), limit=60))
    assert config_fingerprint(cfg) != config_fingerprint(
        make_config(date(2026, 1, 1), thresholds={"green": 40, "amber": 10})
    )


def test_get_or_compute_hits_and_misses():
    cache = ComplianceCache(max_entries=4)
    calls = []

    def compute():
        calls.append(1)
        return "value"

    assert cache.get_or_compute("k", compute) == "value"
    assert cache.get_or_compute("k", compute) == "value"
    assert len(calls) == 1
    metrics = cache.metrics()
    assert (metrics.hits, metrics.misses, metrics.size) == (1, 1, 1)

    cache.clear_metrics()
    assert cache.metrics().hits == 0
    cache.clear()
    assert len(cache) == 0


def test_lru_eviction():
    cache = ComplianceCache(max_entries=2)
    cache.get_or_compute("a", lambda: 1)
    cache.get_or_compute("b", lambda: 2)
    cache.get_or_compute("a", lambda: 1)
    cache.get_or_compute("c", lambda: 3)
    assert "a" in cache
    assert "c" in cache
    assert "b" not in cache


def test_cache_size_must_be_positive():
    with pytest.raises(InvalidConfigError):
        ComplianceCache(max_entries=0)


def test_compute_errors_are_not_cached():
    cache = ComplianceCache(max_entries=2)

    def fail():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        cache.get_or_compute("k", fail)
    assert "k" not in cache
    assert cache.get_or_compute("k", lambda: 5) == 5


def test_default_cache_module_functions():
    assert get_cached_compliance("x", lambda: 1) == 1
    assert get_cached_compliance("x", lambda: 2) == 1
    metrics = get_metrics()
    assert metrics.hits == 1
    assert metrics.misses == 1


def test_calculator_expands_presence_once(make_trip, make_config):
    trips = [make_trip(date(2025, 11, 1), date(2025, 11, 10))]
    calc = create_compliance_calculator(trips, make_config(date(2025, 11, 20)))

    assert calc.evaluate().days_used == 10
    assert calc.evaluate("2025-11-15").days_used == 10
    assert calc.evaluate(date(2025, 11, 5)).days_used == 4
    assert len(calc.vector("2025-11-01", "2025-11-30")) == 30
    assert len(calc.month(2025, 12)) == 31
    assert len(calc.year(2026)) == 365
    assert calc.earliest_safe_entry(5) == date(2025, 11, 20)
    assert calc.max_stay_days("2025-11-20") == 80

    # a separately built but equal trip list reuses the same presence entry
    same = [Trip(entry_date="2025-11-01", exit_date="2025-11-10", country="France")]
    assert create_compliance_calculator(same, make_config(date(2025, 11, 20))).evaluate().days_used == 10

    assert get_metrics().presence_computations == 1


def test_calculator_results_are_cached(make_trip, make_config):
    calc = create_compliance_calculator([make_trip(date(2025, 11, 1))], make_config(date(2025, 11, 20)))
    first = calc.evaluate()
    hits = get_metrics().hits
    assert calc.evaluate() is first
    assert get_metrics().hits == hits + 1


def test_concurrent_access_is_consistent(make_trip, make_config):
    trips = [make_trip(date(2025, 11, 1), date(2025, 12, 20))]
    cfg = make_config(date(2026, 1, 15))
    results = []

    def worker():
        results.append(create_compliance_calculator(trips, cfg).evaluate().days_used)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results == [50] * 8


def test_membership_checks_while_other_threads_write():
    cache = ComplianceCache(max_entries=16)
    seen = []

    def writer(n):
        for i in range(50):
            cache.get_or_compute(f"{n}:{i}", lambda: i)

    def reader():
        for _ in range(200):
            seen.append((len(cache), "0:0" in cache))

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    threads.append(threading.Thread(target=reader))
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert all(size <= 16 for size, _ in seen)
    assert "0:0" not in cache
    assert len(cache) == 16


def test_open_ended_trips_expand_per_reference_date(make_config):
    trips = [Trip(entry_date="2025-11-01", country="FR")]
    closed = [Trip(entry_date="2025-11-01", exit_date="2025-11-01", country="FR")]
    assert trips_fingerprint(trips) != trips_fingerprint(closed)

    calc = create_compliance_calculator(trips, make_config(date(2025, 11, 11)))
    assert calc.evaluate().days_used == 10
    assert calc.evaluate("2025-11-21").days_used == 20
    assert calc.evaluate().days_used == 10
    assert get_metrics().presence_computations == 2
