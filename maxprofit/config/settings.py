"""
Application configuration using Pydantic BaseSettings.
"""

from typing import Optional
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    @property
    def environment(self) -> str:
        """Lowercase environment for compatibility."""
        return self.ENVIRONMENT.lower()

    @property
    def app_version(self) -> str:
        """Application version."""
        return "1.0.0"

    # API Settings
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Max Profit Analyzer"

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    LOG_FILE_PATH: Optional[str] = None

    # Analysis Configuration
    ALLOW_EMPTY_SERIES: bool = False  # empty series yields 0 instead of an error
    MAX_SERIES_LENGTH: int = 100_000

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        """Accept standard level names, case-insensitively."""
        v = str(v).upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return v

    @field_validator('LOG_FORMAT', mode='before')
    @classmethod
    def validate_log_format(cls, v):
        """Accept 'json' or 'console', case-insensitively."""
        v = str(v).lower()
        if v not in ("json", "console"):
            raise ValueError("LOG_FORMAT must be 'json' or 'console'")
        return v

    @field_validator('MAX_SERIES_LENGTH')
    @classmethod
    def validate_max_series_length(cls, v):
        if v < 1:
            raise ValueError("MAX_SERIES_LENGTH must be positive")
        return v


@lru_cache()
def get_settings() -> Settings:
    _settings = Settings()
    return _settings
