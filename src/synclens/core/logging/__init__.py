"""
SyncLens Logging Module - Structured Application Logging.

This module provides the ambient logging infrastructure for SyncLens. The
active sync logger backend writes its rendered event records through the
loggers configured here.

Components:
    - logger: Logging configuration and factory functions

Output Formats:
    - JSON: Structured format for log aggregation systems
    - Text: Human-readable console format
    - Rich: Enhanced console output in development

Example:
    >>> from synclens.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Sync logger ready", scope="private")
"""

from .logger import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
