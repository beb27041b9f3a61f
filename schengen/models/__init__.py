"""
Static reference data and enumerations. Nothing here holds mutable state.
"""
from schengen.models.compliance import CalculationMode, RiskLevel
from schengen.models.membership import (
    COUNTRY_NAME_TO_CODE,
    EXCLUDED_COUNTRIES,
    EXCLUDED_COUNTRY_CODES,
    ISO_COUNTRY_CODES,
    MEMBERSHIP_VERSION,
    SCHENGEN_COUNTRY_CODES,
    SCHENGEN_MEMBERS,
    SCHENGEN_MICROSTATES,
    CountryCategory,
)

__all__ = [
    "CalculationMode",
    "RiskLevel",
    "CountryCategory",
    "COUNTRY_NAME_TO_CODE",
    "EXCLUDED_COUNTRIES",
    "EXCLUDED_COUNTRY_CODES",
    "ISO_COUNTRY_CODES",
    "MEMBERSHIP_VERSION",
    "SCHENGEN_COUNTRY_CODES",
    "SCHENGEN_MEMBERS",
    "SCHENGEN_MICROSTATES",
]
