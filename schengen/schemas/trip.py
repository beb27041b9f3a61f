"""Trip input schema: the record shape handed over by the data layer."""
from datetime import date

from pydantic import BaseModel, field_validator, model_validator

from schengen.errors import InvalidDateRangeError, InvalidTripError
from schengen.services.dates import parse_calendar_date


class Trip(BaseModel):
    """One stay interval. Entry and exit days both count as full days.

    A trip still in progress has no exit date; it runs up to the reference date
    of whatever calculation reads it.
    """

    model_config = {"frozen": True}

    id: str | None = None
    entry_date: date
    exit_date: date | None = None
    country: str
    purpose: str | None = None
    is_private: bool = False
    ghosted: bool = False

    @field_validator("entry_date", "exit_date", mode="before")
    @classmethod
    def parse_day(cls, v, info):
        if v is None and info.field_name == "exit_date":
            return None
        if v is None:
            raise InvalidDateRangeError(info.field_name, v, "date is required")
        try:
            return parse_calendar_date(v)
        except ValueError as e:
            raise InvalidDateRangeError(info.field_name, v, f"unparseable date ({e})") from e

    @field_validator("country", mode="before")
    @classmethod
    def strip_country(cls, v):
        if not isinstance(v, str) or not v.strip():
            raise InvalidTripError("country", v, "country is required")
        return v.strip()

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v):
        return None if v is None else str(v)

    @model_validator(mode="after")
    def check_interval(self):
        if self.exit_date is not None and self.exit_date < self.entry_date:
            raise InvalidDateRangeError(
                "dates",
                (self.entry_date, self.exit_date),
                f"exit ({self.exit_date.isoformat()}) is before entry ({self.entry_date.isoformat()})",
            )
        return self

    @property
    def counts_toward_presence(self) -> bool:
        # Private and ghosted trips are excluded from compliance regardless of country
        return not (self.is_private or self.ghosted)

    @property
    def is_open_ended(self) -> bool:
        return self.exit_date is None

    @property
    def duration_days(self) -> int | None:
        if self.exit_date is None:
            return None
        return (self.exit_date - self.entry_date).days + 1
