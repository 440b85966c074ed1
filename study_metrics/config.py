"""Settings for the study-metrics entry points."""

from __future__ import annotations

from datetime import tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # IANA zone used for calendar days; empty means the system zone.
    TIMEZONE: str = ""
    CHART_WINDOW_DAYS: int = 14
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="STUDY_METRICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("TIMEZONE")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        v = v.strip()
        if v:
            ZoneInfo(v)
        return v

    @field_validator("CHART_WINDOW_DAYS")
    @classmethod
    def validate_window(cls, v: int) -> int:
        if v < 1:
            raise ValueError("CHART_WINDOW_DAYS must be at least 1")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"

    def zone(self) -> Optional[tzinfo]:
        return ZoneInfo(self.TIMEZONE) if self.TIMEZONE else None


def get_settings() -> Settings:
    return Settings()
