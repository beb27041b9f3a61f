"""Calculation defaults from environment."""
from datetime import date
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from project root (parent of schengen/) so overrides apply to every entry point
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=_env_path)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=str(_env_path), env_prefix="SCHENGEN_", extra="ignore")

    # Legal cutover: presence before this day never counts
    compliance_start_date: date = date(2025, 10, 12)

    day_limit: int = 90
    window_size_days: int = 180

    # Risk thresholds over days remaining
    risk_green_threshold: int = 30
    risk_amber_threshold: int = 10

    # Dashboard status thresholds over days used
    status_green_max: int = 60
    status_amber_max: int = 75
    status_red_max: int = 89

    cache_max_entries: int = 1024

    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return (v or "INFO").strip().upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
