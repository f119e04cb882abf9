"""
Sync logger selection based on configuration.
"""
from typing import Any, Optional

from synclens.core.config.settings import SYNC_LOGGING_BACKENDS, Settings, settings
from synclens.core.exceptions.custom_exceptions import ConfigurationError
from synclens.core.logging.logger import get_logger
from synclens.loggers.base import SyncEngineLogger
from synclens.loggers.disabled import DisabledLogger
from synclens.loggers.structured import StructlogLoggerAdapter

logger = get_logger(__name__)


def create_sync_logger(
    config: Optional[Settings] = None, logger_override: Optional[Any] = None
) -> SyncEngineLogger:
    """
    Create the sync logger selected by configuration.

    The choice is made once; the returned backend is meant to be held for
    the lifetime of the sync engine.

    Args:
        config: Settings to read; defaults to the application settings
        logger_override: Pre-built structlog logger for the active backend

    Returns:
        SyncEngineLogger: A ``StructlogLoggerAdapter`` or a ``DisabledLogger``

    Raises:
        ConfigurationError: If the configured backend is not supported
    """
    config = config or settings
    backend = str(config.SYNC_LOGGING_BACKEND).lower()

    if backend not in SYNC_LOGGING_BACKENDS:
        raise ConfigurationError(
            f"Unknown sync logging backend: {backend}",
            error_code="CONFIG_UNKNOWN_BACKEND",
            details={"backend": backend, "supported": list(SYNC_LOGGING_BACKENDS)},
        )

    if not config.SYNC_LOGGING_ENABLED or backend == "disabled":
        logger.debug("Sync logging disabled")
        return DisabledLogger()

    logger.debug(
        "Sync logging enabled",
        subsystem=config.SYNC_LOGGER_SUBSYSTEM,
        category=config.SYNC_LOGGER_CATEGORY,
    )
    return StructlogLoggerAdapter(
        subsystem=config.SYNC_LOGGER_SUBSYSTEM,
        category=config.SYNC_LOGGER_CATEGORY,
        logger=logger_override,
    )
