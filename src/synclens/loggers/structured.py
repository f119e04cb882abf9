"""
Structlog-backed sync logger.
"""
from typing import Any, Optional

from synclens.core.logging.logger import get_logger
from synclens.core.logging.severity import Severity
from synclens.formatting.dispatcher import SyncEventFormatter
from synclens.loggers.base import SyncEngineLogger


class StructlogLoggerAdapter(SyncEngineLogger):
    """
    Sync logger writing rendered events to a structlog logger.

    Change-set events are rendered as tables below a one-line header. Every
    record carries its ``severity``; event records also carry the
    ``database_scope`` they belong to.

    Example:
        >>> sync_logger = StructlogLoggerAdapter(subsystem="Notes", category="sync")
        >>> sync_logger.log_event(StateUpdate(), "private")
        >>> sync_logger.notice("Sync engine started")
    """

    def __init__(
        self,
        subsystem: str = "SyncLens",
        category: str = "sync",
        logger: Optional[Any] = None,
    ):
        """
        Create the adapter.

        Args:
            subsystem: Logger name, also used as the tag in event headers
            category: Category bound on every record
            logger: A pre-built structlog logger; when given, no logger is
                created from ``subsystem`` and ``category``
        """
        if logger is None:
            logger = get_logger(subsystem).bind(category=category)
        self.logger = logger
        self.formatter = SyncEventFormatter(tag=subsystem)

    def _emit(self, severity: Severity, message: str, **context: Any) -> None:
        method = getattr(self.logger, severity.method_name)
        method(message, severity=severity.value, **context)

    def log_event(self, event: object, database_scope: str) -> None:
        try:
            formatted = self.formatter.format(event, database_scope)
        except Exception as e:
            self._emit(
                Severity.FAULT,
                f"{self.formatter.prefix(database_scope)} failed to format "
                f"{type(event).__name__}: {e}",
                database_scope=database_scope,
            )
            return
        self._emit(
            formatted.severity, formatted.message, database_scope=database_scope
        )

    def debug(self, message: str) -> None:
        self._emit(Severity.DEBUG, message)

    def info(self, message: str) -> None:
        self._emit(Severity.INFO, message)

    def notice(self, message: str) -> None:
        self._emit(Severity.NOTICE, message)

    def warning(self, message: str) -> None:
        self._emit(Severity.WARNING, message)

    def error(self, message: str) -> None:
        self._emit(Severity.ERROR, message)

    def fault(self, message: str) -> None:
        self._emit(Severity.FAULT, message)
