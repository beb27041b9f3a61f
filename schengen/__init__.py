"""
Schengen 90/180-day compliance core.

Pure calculation over a subject's trips: presence days, rolling-window counts,
risk levels, safe-entry planning and per-day compliance vectors.
"""
from schengen.errors import (
    ComplianceError,
    InvalidConfigError,
    InvalidDateRangeError,
    InvalidReferenceDateError,
    InvalidTripError,
    UnknownCountryError,
)
from schengen.models.compliance import CalculationMode, RiskLevel
from schengen.schemas import (
    CacheMetrics,
    ComplianceConfig,
    ComplianceResult,
    CountryValidation,
    ExpiringDay,
    RiskThresholds,
    SafeEntryResult,
    StatusThresholds,
    Trip,
    WindowBounds,
)
from schengen.services.cache import (
    ComplianceCache,
    ComplianceCalculator,
    clear_cache,
    clear_metrics,
    config_fingerprint,
    create_compliance_calculator,
    get_cached_compliance,
    get_metrics,
    trips_fingerprint,
)
from schengen.services.compliance import (
    batch_calculate_compliance,
    calculate_compliance,
    get_compliance_at_dates,
)
from schengen.services.presence import count_travel_days, presence_bounds, presence_days, sorted_presence
from schengen.services.registry import (
    get_country_name,
    get_schengen_countries,
    get_schengen_country_codes,
    is_schengen_country,
    normalize_country_code,
    validate_country,
)
from schengen.services.risk import (
    get_display_status,
    get_risk_action,
    get_risk_description,
    get_risk_level,
    get_severity_score,
    get_status_from_days_used,
)
from schengen.services.safe_entry import (
    days_until_compliant,
    earliest_safe_entry,
    get_safe_entry_info,
    max_rolling_stay_days,
    max_stay_days,
    project_expiring_days,
)
from schengen.services.vector import (
    compute_compliance_vector,
    compute_month_compliance,
    compute_year_compliance,
    days_used_series,
)
from schengen.services.window import (
    calculate_days_remaining,
    can_safely_enter,
    days_used_in_window,
    get_window_bounds,
    is_compliant,
    is_in_window,
)

__version__ = "0.1.0"
