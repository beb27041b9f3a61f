"""Error taxonomy for compliance calculations.

Every error here is raised to the caller as-is. None of them derive from
ValueError, so a failure inside a pydantic validator reaches the caller as the
specific error rather than a generic ValidationError.
"""
from __future__ import annotations

from typing import Any


class ComplianceError(Exception):
    """Base class for all compliance calculation failures."""


class InvalidTripError(ComplianceError):
    """A trip record is malformed (missing field, blank country, bad interval)."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid trip {field}: {reason}")


class InvalidDateRangeError(InvalidTripError):
    """A trip date could not be parsed, or the exit date precedes the entry date."""

    def __init__(self, field: str, value: Any, reason: str):
        super().__init__(field, value, reason)


class UnknownCountryError(ComplianceError):
    def __init__(self, country: Any):
        self.country = country
        super().__init__(f'Unknown country: "{country}". Use an ISO 3166-1 alpha-2 code or a known country name.')


class InvalidReferenceDateError(ComplianceError):
    def __init__(self, value: Any, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid reference date {value!r}: {reason}")


class InvalidConfigError(ComplianceError):
    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f'Invalid configuration "{key}": {reason}')
