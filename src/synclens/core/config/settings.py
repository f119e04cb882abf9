"""
Core configuration management for SyncLens.

This module provides centralized configuration management using Pydantic settings
with support for environment variables, type validation, and sensible defaults.
All application settings are defined here.

Classes:
    Settings: Main configuration class with all application settings

Environment Variables:
    Application settings can be overridden using environment variables with the
    same names as the class attributes (case-sensitive).

Example:
    >>> from synclens.core.config.settings import Settings
    >>> settings = Settings()
    >>> print(settings.SYNC_LOGGING_BACKEND)
    structlog

Configuration Sections:
    - Application: Basic app configuration (name, version, environment)
    - Logging: Application logging configuration
    - Sync logging: Backend selection and sink identity for sync event logs
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SYNC_LOGGING_BACKENDS = ("structlog", "disabled")


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables using the
    same name as the attribute. For example, the SYNC_LOGGING_ENABLED
    environment variable will override the SYNC_LOGGING_ENABLED setting.

    Attributes:
        APP_NAME: Application name identifier
        APP_VERSION: Current application version
        ENVIRONMENT: Deployment environment (development/staging/production)
        DEBUG: Enable debug mode with rich console logging

        LOG_LEVEL: Logging level (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        LOG_FORMAT: Log format (json/text)
        LOG_FILE_PATH: Path for log file output (optional)

        SYNC_LOGGING_ENABLED: Master switch for sync event logging
        SYNC_LOGGING_BACKEND: Sync logger backend (structlog/disabled)
        SYNC_LOGGER_SUBSYSTEM: Subsystem label, also used as the event tag
        SYNC_LOGGER_CATEGORY: Category label bound on every sync record

    Example:
        >>> settings = Settings(SYNC_LOGGING_ENABLED=False)
        >>> print(f"Sync logging: {settings.SYNC_LOGGING_ENABLED}")
    """

    # Application
    APP_NAME: str = "SyncLens"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    LOG_FILE_PATH: Optional[str] = None

    # Sync Logging
    SYNC_LOGGING_ENABLED: bool = True
    SYNC_LOGGING_BACKEND: str = "structlog"
    SYNC_LOGGER_SUBSYSTEM: str = "SyncLens"
    SYNC_LOGGER_CATEGORY: str = "sync"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate logging level is a supported value.

        Ensures the log level is one of the standard Python logging
        levels. Converts to uppercase for consistency.

        Args:
            v (str): The log level value to validate

        Returns:
            str: The validated and normalized log level

        Raises:
            ValueError: If log level is not supported
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of: {valid_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format is either json or text."""
        if v.lower() not in ("json", "text"):
            raise ValueError("LOG_FORMAT must be one of: ['json', 'text']")
        return v.lower()

    @field_validator("SYNC_LOGGING_BACKEND")
    @classmethod
    def validate_sync_logging_backend(cls, v: str) -> str:
        """
        Validate the sync logger backend name.

        Args:
            v (str): Backend name

        Returns:
            str: The lower-cased backend name

        Raises:
            ValueError: If the backend is not one of SYNC_LOGGING_BACKENDS
        """
        if v.lower() not in SYNC_LOGGING_BACKENDS:
            raise ValueError(
                f"SYNC_LOGGING_BACKEND must be one of: {list(SYNC_LOGGING_BACKENDS)}"
            )
        return v.lower()

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",  # This will ignore extra fields from environment
    )


def get_settings() -> Settings:
    """Get application settings instance"""
    return Settings()


settings = Settings()
