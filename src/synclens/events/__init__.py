"""
Sync engine events and the values they carry.
"""

from .models import (
    DEFAULT_OWNER_NAME,
    AccountChange,
    AccountChangeType,
    DeletionReason,
    DidFetchChanges,
    DidFetchRecordZoneChanges,
    DidSendChanges,
    ErrorCode,
    FetchedDatabaseChanges,
    FetchedRecordZoneChanges,
    RecordID,
    RecordModification,
    SentDatabaseChanges,
    SentRecordZoneChanges,
    SignIn,
    SignOut,
    StateUpdate,
    SwitchAccounts,
    SyncError,
    SyncEvent,
    UnknownAccountChange,
    UnknownEvent,
    WillFetchChanges,
    WillFetchRecordZoneChanges,
    WillSendChanges,
    ZoneID,
    ZoneModification,
)

__all__ = [
    "DEFAULT_OWNER_NAME",
    "AccountChange",
    "AccountChangeType",
    "DeletionReason",
    "DidFetchChanges",
    "DidFetchRecordZoneChanges",
    "DidSendChanges",
    "ErrorCode",
    "FetchedDatabaseChanges",
    "FetchedRecordZoneChanges",
    "RecordID",
    "RecordModification",
    "SentDatabaseChanges",
    "SentRecordZoneChanges",
    "SignIn",
    "SignOut",
    "StateUpdate",
    "SwitchAccounts",
    "SyncError",
    "SyncEvent",
    "UnknownAccountChange",
    "UnknownEvent",
    "WillFetchChanges",
    "WillFetchRecordZoneChanges",
    "WillSendChanges",
    "ZoneID",
    "ZoneModification",
]
