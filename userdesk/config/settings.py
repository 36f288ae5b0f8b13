"""Configuration management using Pydantic Settings.

Settings are loaded from environment variables and an optional ``.env`` file.

The configuration is organized into logical groups:
- DatabaseConfig: Database connection settings
- LoggingConfig: Logging levels, files, and debugging options
"""

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseConfig(BaseModel):
    """Database connection configuration."""

    url: str = "sqlite+aiosqlite:///data/db/userdesk.db"
    echo: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path = Path("data/logs/userdesk.log")
    real_time_debug: bool = True


# Flat environment variable names accepted alongside the nested ones
_FLAT_ENV_MAP = {
    "database_url": ("database", "url"),
    "database_echo": ("database", "echo"),
    "console_log_level": ("logging", "console_level"),
    "file_log_level": ("logging", "file_level"),
    "log_file": ("logging", "log_file"),
    "log_real_time_debug": ("logging", "real_time_debug"),
}


class Settings(BaseSettings):
    """Main application settings with environment variable support.

    Environment variables can be set using flat naming or nested naming:
    - Flat: DATABASE_URL, CONSOLE_LOG_LEVEL, LOG_FILE
    - Nested: DATABASE__URL, LOGGING__CONSOLE_LEVEL, LOGGING__LOG_FILE

    The .env file is automatically loaded for development convenience.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()

    data_dir: Path = Path("data")

    @model_validator(mode="before")
    @classmethod
    def transform_flat_env_vars(cls, data: Any) -> Any:
        """Map flat environment variables (DATABASE_URL) onto the nested models."""
        if not isinstance(data, dict):
            return data

        transformed: dict[str, dict[str, Any]] = {}
        for env_key, (section, field_key) in _FLAT_ENV_MAP.items():
            if env_key in data:
                transformed.setdefault(section, {})[field_key] = data.pop(env_key)
            elif (value := os.environ.get(env_key.upper())) is not None:
                # Flat names are not fields, so the env source never collects them
                transformed.setdefault(section, {})[field_key] = value

        for section, values in transformed.items():
            existing = data.get(section)
            if isinstance(existing, dict):
                # Nested variables win over flat ones
                data[section] = {**values, **existing}
            else:
                data[section] = values

        return data


# Singleton instance for application use
settings = Settings()
