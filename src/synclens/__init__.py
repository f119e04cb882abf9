"""
SyncLens - Structured logging for sync engine events

SyncLens turns the lifecycle events of a remote data-synchronization engine
(account changes, fetch and send cycles, per-record and per-zone outcomes)
into readable diagnostic log records. Change sets are rendered as aligned,
sorted tables; the logging backend can be swapped or disabled.

Key Features:
    - One log record per sync event, tables for change sets
    - Forward-compatible labels for error codes and deletion reasons
    - Structlog backend with rich console output in development
    - Disabled backend that skips all formatting work
    - Pydantic settings for backend selection

Modules:
    core: Configuration, logging and exceptions
    events: Sync event data model
    formatting: Labels, tables and event dispatch
    loggers: Sync logger backends

Example:
    >>> from synclens import create_sync_logger
    >>> from synclens.events import StateUpdate
    >>> sync_logger = create_sync_logger()
    >>> sync_logger.log_event(StateUpdate(), "private")
"""

__version__ = "0.1.0"
__author__ = "SyncLens"
__description__ = (
    "Structured, pluggable logging of sync engine lifecycle events with "
    "tabular rendering of change sets."
)

from synclens.core.config.settings import Settings
from synclens.core.logging.logger import get_logger
from synclens.loggers import (
    DisabledLogger,
    StructlogLoggerAdapter,
    SyncEngineLogger,
    create_sync_logger,
)

__all__ = [
    "Settings",
    "get_logger",
    "SyncEngineLogger",
    "StructlogLoggerAdapter",
    "DisabledLogger",
    "create_sync_logger",
]
