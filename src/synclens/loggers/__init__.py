"""
Sync engine loggers.

Every backend implements ``SyncEngineLogger``: one structured ``log_event``
call plus six free-text severity channels. Backends are interchangeable and
chosen once, usually through ``create_sync_logger``.

Backends:
    - StructlogLoggerAdapter: Renders events and writes them to structlog
    - DisabledLogger: Discards everything without formatting

Example:
    >>> from synclens.loggers import create_sync_logger
    >>> sync_logger = create_sync_logger()
    >>> sync_logger.log_event(WillFetchChanges(), "private")
"""

from .base import SyncEngineLogger
from .disabled import DisabledLogger
from .factory import create_sync_logger
from .structured import StructlogLoggerAdapter

__all__ = [
    "SyncEngineLogger",
    "DisabledLogger",
    "StructlogLoggerAdapter",
    "create_sync_logger",
]
