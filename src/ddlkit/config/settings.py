"""
Configuration management for ddlkit.

This module provides environment-based configuration using Pydantic BaseSettings.
Only ambient concerns live here (logging, SQL echo, the default datasource
name); choosing which dialect or database to talk to stays with the caller.
"""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("DDLKIT_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the DDLKIT_ prefix.
    For example, DDLKIT_LOG_LEVEL=DEBUG overrides the log_level setting.
    """

    log_level: str = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(
        default=False, description="Also write logs to a daily rotating file"
    )
    log_file_dir: str = Field(
        default="logs/", description="Directory for rotating log files"
    )

    default_datasource: str = Field(
        default="default",
        description="Datasource name given to schema builders created without one",
    )
    sql_echo: bool = Field(
        default=False,
        description="Echo SQL emitted through SqlAlchemyConnection engines",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalise the level name and reject unknown levels."""
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{value}'. Expected one of: {', '.join(_LOG_LEVELS)}"
            )
        return level

    model_config = SettingsConfigDict(
        env_prefix="DDLKIT_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache so settings are loaded once and reused across the
    application lifecycle. Tests that change the environment should call
    ``get_settings.cache_clear()``.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
