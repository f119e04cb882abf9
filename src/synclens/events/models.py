"""
Data model for sync engine lifecycle events.

This module defines the identifiers, change descriptors, error values and the
``SyncEvent`` tagged union consumed by the sync loggers. Every type is an
immutable value: events are built by the sync engine, handed to a logger once
and thrown away.

Classes:
    ZoneID, RecordID: Identifiers for zones and records
    ZoneModification, RecordModification: Changed zones and records
    ErrorCode, SyncError: Error codes reported by the sync service
    DeletionReason: Why a zone was deleted
    AccountChangeType and subclasses: Account transitions
    SyncEvent and subclasses: The lifecycle events themselves

Codes the sync service adds in the future are carried as raw values
(plain ``int`` error codes, arbitrary deletion reasons, ``UnknownEvent``,
``UnknownAccountChange``) rather than rejected.

Example:
    >>> zone = ZoneID("Notes")
    >>> event = FetchedRecordZoneChanges(
    ...     modifications=[RecordModification(RecordID("N1", zone), "Note")],
    ...     deletions=[(RecordID("N2", zone), "Note")],
    ... )
    >>> event.name
    'fetchedRecordZoneChanges'
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Optional, Sequence, Tuple, Union

DEFAULT_OWNER_NAME = "__defaultOwner__"


@dataclass(frozen=True)
class ZoneID:
    """Identifies a zone, a named partition of synced records."""

    zone_name: str
    owner_name: str = DEFAULT_OWNER_NAME


@dataclass(frozen=True)
class RecordID:
    """Identifies a single synced record inside a zone."""

    record_name: str
    zone_id: ZoneID = field(default_factory=lambda: ZoneID("_defaultZone"))


@dataclass(frozen=True)
class ZoneModification:
    """A zone that was modified or saved."""

    zone_id: ZoneID

    @property
    def zone_name(self) -> str:
        return self.zone_id.zone_name

    @property
    def owner_name(self) -> str:
        return self.zone_id.owner_name


@dataclass(frozen=True)
class RecordModification:
    """A record that was modified or saved, along with its record type."""

    record_id: RecordID
    record_type: str


class ErrorCode(IntEnum):
    """Error codes reported by the sync service, with their wire values."""

    INTERNAL_ERROR = 1
    PARTIAL_FAILURE = 2
    NETWORK_UNAVAILABLE = 3
    NETWORK_FAILURE = 4
    BAD_CONTAINER = 5
    SERVICE_UNAVAILABLE = 6
    REQUEST_RATE_LIMITED = 7
    MISSING_ENTITLEMENT = 8
    NOT_AUTHENTICATED = 9
    PERMISSION_FAILURE = 10
    UNKNOWN_ITEM = 11
    INVALID_ARGUMENTS = 12
    RESULTS_TRUNCATED = 13
    SERVER_RECORD_CHANGED = 14
    SERVER_REJECTED_REQUEST = 15
    ASSET_FILE_NOT_FOUND = 16
    ASSET_FILE_MODIFIED = 17
    INCOMPATIBLE_VERSION = 18
    CONSTRAINT_VIOLATION = 19
    OPERATION_CANCELLED = 20
    CHANGE_TOKEN_EXPIRED = 21
    BATCH_REQUEST_FAILED = 22
    ZONE_BUSY = 23
    BAD_DATABASE = 24
    QUOTA_EXCEEDED = 25
    ZONE_NOT_FOUND = 26
    LIMIT_EXCEEDED = 27
    USER_DELETED_ZONE = 28
    TOO_MANY_PARTICIPANTS = 29
    ALREADY_SHARED = 30
    REFERENCE_VIOLATION = 31
    MANAGED_ACCOUNT_RESTRICTED = 32
    PARTICIPANT_MAY_NEED_VERIFICATION = 33
    SERVER_RESPONSE_LOST = 34
    ASSET_NOT_AVAILABLE = 35
    ACCOUNT_TEMPORARILY_UNAVAILABLE = 36
    PARTICIPANT_ALREADY_INVITED = 37


@dataclass(frozen=True)
class SyncError:
    """
    An error reported for a failed save or delete.

    Attributes:
        code: An ``ErrorCode`` member, or a raw ``int`` for codes newer
            than this package
        error_code: Optional numeric sub-code; defaults to the code's value
    """

    code: Union[ErrorCode, int]
    error_code: Optional[int] = None

    @property
    def sub_code(self) -> int:
        if self.error_code is not None:
            return self.error_code
        return int(self.code)


class DeletionReason(Enum):
    """Why a zone deletion was reported by the sync service."""

    DELETED = "deleted"
    PURGED = "purged"
    ENCRYPTED_DATA_RESET = "encryptedDataReset"


# Account changes


class AccountChangeType:
    """Base class for account transitions carried by ``AccountChange``."""


@dataclass(frozen=True)
class SignIn(AccountChangeType):
    current_user: RecordID


@dataclass(frozen=True)
class SignOut(AccountChangeType):
    previous_user: RecordID


@dataclass(frozen=True)
class SwitchAccounts(AccountChangeType):
    previous_user: RecordID
    current_user: RecordID


@dataclass(frozen=True)
class UnknownAccountChange(AccountChangeType):
    description: str = "unknown"


# Events


class SyncEvent:
    """
    Base class for every sync engine lifecycle event.

    Subclasses set ``name`` to the label used in log headers. ``description``
    is the textual form used when an event cannot be rendered specifically.
    """

    name = "syncEvent"

    @property
    def description(self) -> str:
        return repr(self)


@dataclass(frozen=True)
class StateUpdate(SyncEvent):
    name = "stateUpdate"


@dataclass(frozen=True)
class AccountChange(SyncEvent):
    change: AccountChangeType
    name = "accountChange"


@dataclass(frozen=True)
class FetchedDatabaseChanges(SyncEvent):
    modifications: Sequence[ZoneModification] = ()
    deletions: Sequence[Tuple[ZoneID, Union[DeletionReason, Any]]] = ()
    name = "fetchedDatabaseChanges"


@dataclass(frozen=True)
class FetchedRecordZoneChanges(SyncEvent):
    modifications: Sequence[RecordModification] = ()
    deletions: Sequence[Tuple[RecordID, str]] = ()
    name = "fetchedRecordZoneChanges"


@dataclass(frozen=True)
class SentDatabaseChanges(SyncEvent):
    saved_zones: Sequence[ZoneModification] = ()
    failed_zone_saves: Sequence[Tuple[ZoneModification, SyncError]] = ()
    deleted_zone_ids: Sequence[ZoneID] = ()
    failed_zone_deletes: Sequence[Tuple[ZoneID, SyncError]] = ()
    name = "sentDatabaseChanges"


@dataclass(frozen=True)
class SentRecordZoneChanges(SyncEvent):
    saved_records: Sequence[RecordModification] = ()
    failed_record_saves: Sequence[Tuple[RecordModification, SyncError]] = ()
    deleted_record_ids: Sequence[RecordID] = ()
    failed_record_deletes: Sequence[Tuple[RecordID, SyncError]] = ()
    name = "sentRecordZoneChanges"


@dataclass(frozen=True)
class WillFetchChanges(SyncEvent):
    name = "willFetchChanges"


@dataclass(frozen=True)
class DidFetchChanges(SyncEvent):
    name = "didFetchChanges"


@dataclass(frozen=True)
class WillSendChanges(SyncEvent):
    name = "willSendChanges"


@dataclass(frozen=True)
class DidSendChanges(SyncEvent):
    name = "didSendChanges"


@dataclass(frozen=True)
class WillFetchRecordZoneChanges(SyncEvent):
    zone_id: ZoneID
    name = "willFetchRecordZoneChanges"


@dataclass(frozen=True)
class DidFetchRecordZoneChanges(SyncEvent):
    zone_id: ZoneID
    error: Optional[SyncError] = None
    name = "didFetchRecordZoneChanges"


@dataclass(frozen=True)
class UnknownEvent(SyncEvent):
    """An event kind this package does not recognize yet."""

    event_description: str
    name = "unknown"

    @property
    def description(self) -> str:
        return self.event_description
