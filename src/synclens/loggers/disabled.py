"""
No-op sync logger.
"""
from synclens.loggers.base import SyncEngineLogger


class DisabledLogger(SyncEngineLogger):
    """
    Sync logger that discards everything.

    Used when sync logging is turned off. Events are not formatted at all,
    so a disabled logger costs nothing beyond the method call.
    """

    def log_event(self, event: object, database_scope: str) -> None:
        pass

    def debug(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def notice(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def fault(self, message: str) -> None:
        pass
