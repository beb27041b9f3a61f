from schengen.schemas.trip import Trip
from schengen.schemas.country import CountryValidation
from schengen.schemas.compliance import (
    CacheMetrics,
    ComplianceConfig,
    ComplianceResult,
    ExpiringDay,
    RiskThresholds,
    SafeEntryResult,
    StatusThresholds,
    WindowBounds,
)
