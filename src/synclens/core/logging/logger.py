"""
Structured logging configuration for SyncLens.

This module provides logging infrastructure with support for structured
logging, JSON formatting and rich console output. It integrates structlog
while maintaining compatibility with standard Python logging, which is also
where sync event records rendered by the active backend end up.

Functions:
    setup_logging(): Initialize logging configuration
    get_logger(name): Get configured logger instance

Configuration:
    Logging behavior is controlled by environment variables:
    - LOG_LEVEL: Minimum log level (DEBUG/INFO/WARNING/ERROR/CRITICAL)
    - LOG_FORMAT: Output format (json/text)
    - LOG_FILE_PATH: Optional file output path
    - DEBUG: Enable development mode with rich formatting

Example:
    >>> from synclens.core.logging.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Sync logger created", backend="structlog")
"""

import logging
import sys
from pathlib import Path

import structlog
from rich.console import Console
from rich.logging import RichHandler

from synclens.core.config.settings import settings


def setup_logging() -> None:
    """
    Initialize logging configuration.

    Sets up structured logging with configurable output formats, handlers,
    and processing pipelines. Configures both structlog and standard library
    logging.

    The function selects handlers as follows:
        - Development/debug: Rich console handler with colors and formatting
        - Otherwise: Plain stream handler on stdout
        - File: Additional file handler when LOG_FILE_PATH is configured

    Multi-line sync event tables pass through untouched; the console
    renderer prints them below the event header.

    Example:
        >>> from synclens.core.logging.logger import setup_logging
        >>> setup_logging()  # Call once at application startup
    """

    # Configure structlog processors
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    handlers = []

    # Console handler with Rich formatting
    if settings.DEBUG or settings.ENVIRONMENT == "development":
        console = Console(stderr=True)
        rich_handler = RichHandler(
            console=console,
            show_time=False,
            show_level=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        rich_handler.setLevel(settings.LOG_LEVEL)
        handlers.append(rich_handler)
    else:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setLevel(settings.LOG_LEVEL)
        handlers.append(stream_handler)

    # File handler if specified
    if settings.LOG_FILE_PATH:
        file_path = Path(settings.LOG_FILE_PATH)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, encoding="utf-8")
        file_handler.setLevel(settings.LOG_LEVEL)
        handlers.append(file_handler)

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        handlers=handlers,
        format="%(message)s",
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a configured structured logger instance.

    Args:
        name (str): Logger name, typically __name__ of the calling module
            or the sync logger subsystem label

    Returns:
        structlog.stdlib.BoundLogger: Configured logger instance

    Example:
        >>> logger = get_logger("SyncLens").bind(category="sync")
        >>> logger.debug("SyncLens (private.db) stateUpdate")

    Note:
        If logging hasn't been configured yet, this function will
        automatically call setup_logging() to ensure proper initialization.
    """
    if not structlog.is_configured():
        setup_logging()
    return structlog.get_logger(name)


# Setup logging on import
setup_logging()
