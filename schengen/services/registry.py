"""Schengen membership lookups: classify and normalise country codes and names."""
from __future__ import annotations

from schengen.errors import UnknownCountryError
from schengen.models.membership import (
    COUNTRY_NAME_TO_CODE,
    EXCLUDED_COUNTRIES,
    ISO_COUNTRY_CODES,
    SCHENGEN_COUNTRY_CODES,
    SCHENGEN_MEMBERS,
    SCHENGEN_MICROSTATES,
    CountryCategory,
)
from schengen.schemas.country import CountryValidation


def _lookup_code(raw: str) -> str | None:
    key = raw.strip().upper()
    if not key:
        return None
    if len(key) == 2 and key in ISO_COUNTRY_CODES:
        return key
    return COUNTRY_NAME_TO_CODE.get(key)


def validate_country(country: str | None) -> CountryValidation:
    """Classify a country code or name. Never raises; unknown input comes back with valid=False."""
    if not isinstance(country, str) or not country.strip():
        return CountryValidation(
            valid=False, normalized=None, category=CountryCategory.unknown, reason="country is blank"
        )

    code = _lookup_code(country)
    if code is None:
        return CountryValidation(
            valid=False,
            normalized=None,
            category=CountryCategory.unknown,
            reason=f'unknown country "{country.strip()}"',
        )

    if code in SCHENGEN_MEMBERS:
        return CountryValidation(
            valid=True,
            normalized=code,
            category=CountryCategory.schengen_member,
            name=SCHENGEN_MEMBERS[code][0],
            is_schengen=True,
        )
    if code in SCHENGEN_MICROSTATES:
        name, rationale = SCHENGEN_MICROSTATES[code]
        return CountryValidation(
            valid=True,
            normalized=code,
            category=CountryCategory.microstate,
            name=name,
            is_schengen=True,
            is_microstate=True,
            reason=rationale,
        )
    if code in EXCLUDED_COUNTRIES:
        name, reason = EXCLUDED_COUNTRIES[code]
        return CountryValidation(
            valid=True, normalized=code, category=CountryCategory.excluded, name=name, reason=reason
        )
    return CountryValidation(
        valid=True, normalized=code, category=CountryCategory.other, reason="not part of the Schengen Area"
    )


def is_schengen_country(country: str | None) -> bool:
    """True for Schengen members and open-border microstates."""
    if not isinstance(country, str):
        return False
    return _lookup_code(country) in SCHENGEN_COUNTRY_CODES


def normalize_country_code(country: str) -> str:
    """ISO 3166-1 alpha-2 code for a code or known name ("france" -> "FR", "UK" -> "GB")."""
    result = validate_country(country)
    if not result.valid:
        raise UnknownCountryError(country)
    return result.normalized


def get_country_name(code: str) -> str:
    result = validate_country(code)
    return result.name or result.normalized or code


def get_schengen_country_codes() -> list[str]:
    return sorted(SCHENGEN_COUNTRY_CODES)


def get_schengen_countries() -> list[dict]:
    """Members and microstates as {code, name, is_microstate}, sorted by name."""
    countries = [
        {"code": code, "name": name, "is_microstate": False} for code, (name, _) in SCHENGEN_MEMBERS.items()
    ]
    countries += [
        {"code": code, "name": name, "is_microstate": True} for code, (name, _) in SCHENGEN_MICROSTATES.items()
    ]
    return sorted(countries, key=lambda c: c["name"])
