from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Symptom Journal Core"
    ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Numeric extraction window around the primary keyword
    NUMERIC_WINDOW_BEFORE: int = 30
    NUMERIC_WINDOW_AFTER: int = 40

    MAX_TRANSCRIPT_LENGTH: int = 5000

    @field_validator("NUMERIC_WINDOW_BEFORE", "NUMERIC_WINDOW_AFTER")
    @classmethod
    def validate_window(cls, v: int) -> int:
        if v < 0:
            raise ValueError("numeric window offsets must be >= 0")
        return v

    @field_validator("MAX_TRANSCRIPT_LENGTH")
    @classmethod
    def validate_max_length(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("MAX_TRANSCRIPT_LENGTH must be positive")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown LOG_LEVEL {v!r}")
        return level

    @property
    def is_production(self) -> bool:
        return self.ENV.lower() in {"production", "prod"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
