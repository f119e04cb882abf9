"""
Base sync logger interface.
"""
from abc import ABC, abstractmethod


class SyncEngineLogger(ABC):
    """
    Abstract base class for sync engine loggers.

    A backend is chosen once at construction and used for the lifetime of the
    sync engine. Implementations must never raise into the caller and must be
    safe to call from several threads at once.
    """

    @abstractmethod
    def log_event(self, event: object, database_scope: str) -> None:
        """
        Log a sync engine event.

        Args:
            event: The sync event to log
            database_scope: The database scope label, e.g. "private",
                "shared" or "global"
        """
        pass

    @abstractmethod
    def debug(self, message: str) -> None:
        """Log a debug message."""
        pass

    @abstractmethod
    def info(self, message: str) -> None:
        """Log an informational message."""
        pass

    @abstractmethod
    def notice(self, message: str) -> None:
        """Log a notice message."""
        pass

    @abstractmethod
    def warning(self, message: str) -> None:
        """Log a warning message."""
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        """Log an error message."""
        pass

    @abstractmethod
    def fault(self, message: str) -> None:
        """Log a fault message."""
        pass
