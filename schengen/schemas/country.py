"""Country validation result."""
from pydantic import BaseModel

from schengen.models.membership import CountryCategory


class CountryValidation(BaseModel):
    model_config = {"frozen": True}

    valid: bool  # False only for unknown input
    normalized: str | None  # ISO 3166-1 alpha-2 code when recognised
    category: CountryCategory
    name: str | None = None
    is_schengen: bool = False  # members and microstates
    is_microstate: bool = False
    reason: str | None = None  # exclusion reason, or why the input was not recognised
