"""
Severity channels for sync logging.

Structlog's stdlib loggers have no notice or fault level, so both are
written through the nearest stdlib method and keep their own name in the
``severity`` key of the record.
"""

from enum import Enum


class Severity(str, Enum):
    """The six severity channels of a sync logger."""

    DEBUG = "debug"
    INFO = "info"
    NOTICE = "notice"
    WARNING = "warning"
    ERROR = "error"
    FAULT = "fault"

    @property
    def method_name(self) -> str:
        """Name of the structlog logger method records are written with."""
        return _METHOD_NAMES[self]


_METHOD_NAMES = {
    Severity.DEBUG: "debug",
    Severity.INFO: "info",
    Severity.NOTICE: "info",
    Severity.WARNING: "warning",
    Severity.ERROR: "error",
    Severity.FAULT: "critical",
}
