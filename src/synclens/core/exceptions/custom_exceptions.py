"""
Custom exception hierarchy for SyncLens error handling.

Exceptions are reserved for programming and configuration mistakes. Values
the sync engine may legitimately produce, such as error codes, deletion
reasons or event kinds this package does not know yet, never raise; they
resolve to placeholder labels instead.

Exception Hierarchy:
    SyncLensError (base)
    ├── ConfigurationError: Invalid backend selection or settings
    └── TableShapeError: Misuse of the event table builder

Example:
    >>> raise ConfigurationError(
    ...     "Unknown sync logging backend",
    ...     error_code="CONFIG_UNKNOWN_BACKEND",
    ...     details={"backend": "syslog"}
    ... )
"""

from typing import Any, Dict, Optional


class SyncLensError(Exception):
    """
    Base exception class for all SyncLens errors.

    Attributes:
        message (str): Human-readable error description
        error_code (str): Machine-readable error identifier
        details (Dict[str, Any]): Additional contextual information

    The error_code defaults to the class name when not specified.

    Example:
        >>> raise SyncLensError(
        ...     "Column does not exist",
        ...     error_code="TABLE_UNKNOWN_COLUMN",
        ...     details={"column": "size"}
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(SyncLensError):
    """
    Raised when configuration validation or backend selection fails.

    Common scenarios:
        - Unknown SYNC_LOGGING_BACKEND passed directly to the factory
        - Invalid environment variable values
    """

    pass


class TableShapeError(SyncLensError):
    """Raised when a cell is appended to a column the event table does not have"""

    pass
