"""Entry points composing registry, expansion, window counting and risk classification."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date

from schengen.schemas.compliance import ComplianceConfig, ComplianceResult
from schengen.services.cache import create_compliance_calculator
from schengen.services.presence import TripLike
from schengen.services.window import coerce_reference_date

logger = logging.getLogger(__name__)


def calculate_compliance(trips: Iterable[TripLike], config: ComplianceConfig) -> ComplianceResult:
    """Compliance of one subject's trips on config.reference_date."""
    return create_compliance_calculator(trips, config).evaluate()


def batch_calculate_compliance(
    trips_by_subject: Mapping[str, Iterable[TripLike]],
    reference_date: date | str,
    **overrides,
) -> dict[str, ComplianceResult]:
    """Evaluate many subjects against one shared configuration.

    overrides are ComplianceConfig fields (limit, window_size_days, thresholds, ...).
    The first subject with invalid data raises; there are no partial results.
    """
    config = ComplianceConfig(reference_date=coerce_reference_date(reference_date), **overrides)
    results = {}
    for subject, trips in trips_by_subject.items():
        results[str(subject)] = calculate_compliance(trips, config)
    logger.info("Evaluated %d subjects for %s", len(results), config.reference_date)
    return results


def get_compliance_at_dates(
    trips: Iterable[TripLike],
    dates: Iterable[date | str],
    config: ComplianceConfig,
) -> dict[date, ComplianceResult]:
    """Results keyed by each requested date; config supplies everything but the reference date."""
    calculator = create_compliance_calculator(trips, config)
    results = {}
    for value in dates:
        day = coerce_reference_date(value)
        if day not in results:
            results[day] = calculator.evaluate(day)
    return results
