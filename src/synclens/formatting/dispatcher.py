"""
Event dispatcher turning sync events into log record text.

``SyncEventFormatter`` selects the fields of each event kind, fills an
``EventTable`` for change-set events and returns the final text together with
the severity it should be logged at. Known events are logged at debug
severity; anything unrecognized is logged at warning severity with its own
description so new event kinds are never dropped silently.

Example:
    >>> formatter = SyncEventFormatter(tag="SyncLens")
    >>> formatted = formatter.format(StateUpdate(), "private")
    >>> formatted.message
    'SyncLens (private.db) stateUpdate'
"""

from typing import NamedTuple

from synclens.core.logging.severity import Severity
from synclens.events.models import (
    AccountChange,
    DidFetchChanges,
    DidFetchRecordZoneChanges,
    DidSendChanges,
    FetchedDatabaseChanges,
    FetchedRecordZoneChanges,
    RecordID,
    SentDatabaseChanges,
    SentRecordZoneChanges,
    SignIn,
    SignOut,
    StateUpdate,
    SwitchAccounts,
    SyncError,
    WillFetchChanges,
    WillFetchRecordZoneChanges,
    WillSendChanges,
)
from synclens.formatting.labels import deletion_reason_label, error_label
from synclens.formatting.table import INDENT, EventTable

MODIFIED = "✅ Modified"
SAVED = "✅ Saved"
DELETED = "🗑️ Deleted"
FAILED_SAVE = "🛑 Failed save"
FAILED_DELETE = "🛑 Failed delete"
DELETE_FAILED = "🛑 Delete failed"

# Events without a payload log their name only
_LABEL_ONLY_EVENTS = (
    StateUpdate,
    WillFetchChanges,
    DidFetchChanges,
    WillSendChanges,
    DidSendChanges,
)


class FormattedEvent(NamedTuple):
    severity: Severity
    message: str


def _user(record_id: RecordID) -> str:
    zone_id = record_id.zone_id
    return f"{record_id.record_name}.{zone_id.owner_name}.{zone_id.zone_name}"


def _record_error(error: SyncError) -> str:
    return f"{error_label(error.code)} ({error.sub_code})"


class SyncEventFormatter:
    """Formats sync events into single log records."""

    def __init__(self, tag: str = "SyncLens"):
        self.tag = tag

    def prefix(self, database_scope: str) -> str:
        return f"{self.tag} ({database_scope}.db)"

    def format(self, event: object, database_scope: str) -> FormattedEvent:
        """
        Format one event.

        Args:
            event: The sync event; objects that are not a known event kind
                are reported as unknown events
            database_scope: Label of the database the event belongs to,
                e.g. "private", "shared" or "global"

        Returns:
            FormattedEvent: Severity and full message text
        """
        prefix = self.prefix(database_scope)

        if isinstance(event, _LABEL_ONLY_EVENTS):
            return FormattedEvent(Severity.DEBUG, f"{prefix} {event.name}")
        if isinstance(event, AccountChange):
            return FormattedEvent(
                Severity.DEBUG, self._format_account_change(prefix, event)
            )
        if isinstance(event, FetchedDatabaseChanges):
            table = self._fetched_database_changes_table(event)
        elif isinstance(event, FetchedRecordZoneChanges):
            table = self._fetched_record_zone_changes_table(event)
        elif isinstance(event, SentDatabaseChanges):
            table = self._sent_database_changes_table(event)
        elif isinstance(event, SentRecordZoneChanges):
            table = self._sent_record_zone_changes_table(event)
        elif isinstance(event, WillFetchRecordZoneChanges):
            return FormattedEvent(
                Severity.DEBUG, f"{prefix} {event.name}: {event.zone_id.zone_name}"
            )
        elif isinstance(event, DidFetchRecordZoneChanges):
            zone_id = event.zone_id
            message = f"{prefix} {event.name}: {zone_id.zone_name}:{zone_id.owner_name}"
            if event.error is not None:
                message += f" ❌ {error_label(event.error.code)}"
            return FormattedEvent(Severity.DEBUG, message)
        else:
            return FormattedEvent(
                Severity.WARNING,
                f"{prefix} ⚠️ unknown event: {self._describe(event)}",
            )

        message = f"{prefix} {event.name}"
        rendered = table.render()
        if rendered:
            message += f"\n{INDENT}{rendered}"
        return FormattedEvent(Severity.DEBUG, message)

    @staticmethod
    def _describe(event: object) -> str:
        description = getattr(event, "description", None)
        if isinstance(description, str) and description:
            return description
        return repr(event)

    @staticmethod
    def _format_account_change(prefix: str, event: AccountChange) -> str:
        change = event.change
        if isinstance(change, SignIn):
            return f"{prefix} signIn\n{INDENT}Current user: {_user(change.current_user)}"
        if isinstance(change, SignOut):
            return (
                f"{prefix} signOut\n{INDENT}Previous user: {_user(change.previous_user)}"
            )
        if isinstance(change, SwitchAccounts):
            return (
                f"{prefix} switchAccounts:\n"
                f"{INDENT}Previous user: {_user(change.previous_user)}\n"
                f"{INDENT}Current user:  {_user(change.current_user)}"
            )
        return f"{prefix} accountChange: unknown"

    @staticmethod
    def _fetched_database_changes_table(event: FetchedDatabaseChanges) -> EventTable:
        table = EventTable()
        for modification in event.modifications:
            table.append("action", MODIFIED)
            table.append("zoneName", modification.zone_name)
            table.append("ownerName", modification.owner_name)
            if event.deletions:
                table.append("reason", "")
        for zone_id, reason in event.deletions:
            table.append("action", DELETED)
            table.append("zoneName", zone_id.zone_name)
            table.append("ownerName", zone_id.owner_name)
            table.append("reason", deletion_reason_label(reason))
        return table

    @staticmethod
    def _fetched_record_zone_changes_table(
        event: FetchedRecordZoneChanges,
    ) -> EventTable:
        table = EventTable()
        for modification in event.modifications:
            table.append("action", MODIFIED)
            table.append("recordType", modification.record_type)
            table.append("recordName", modification.record_id.record_name)
        for record_id, record_type in event.deletions:
            table.append("action", DELETED)
            table.append("recordType", record_type)
            table.append("recordName", record_id.record_name)
        return table

    @staticmethod
    def _sent_database_changes_table(event: SentDatabaseChanges) -> EventTable:
        table = EventTable()
        has_failures = bool(event.failed_zone_saves or event.failed_zone_deletes)

        def add(action, zone_id, error=None):
            table.append("action", action)
            table.append("zoneName", zone_id.zone_name)
            table.append("ownerName", zone_id.owner_name)
            if error is not None:
                table.append("error", error_label(error.code))
            elif has_failures:
                table.append("error", "")

        for zone in event.saved_zones:
            add(SAVED, zone.zone_id)
        for zone, error in event.failed_zone_saves:
            add(FAILED_SAVE, zone.zone_id, error)
        for zone_id in event.deleted_zone_ids:
            add(DELETED, zone_id)
        for zone_id, error in event.failed_zone_deletes:
            add(FAILED_DELETE, zone_id, error)
        return table

    @staticmethod
    def _sent_record_zone_changes_table(event: SentRecordZoneChanges) -> EventTable:
        table = EventTable()
        has_failures = bool(event.failed_record_saves or event.failed_record_deletes)

        def add(action, record_type, record_id, error=None):
            table.append("action", action)
            table.append("recordType", record_type)
            table.append("recordName", record_id.record_name)
            if error is not None:
                table.append("error", _record_error(error))
            elif has_failures:
                table.append("error", "")

        for record in event.saved_records:
            add(SAVED, record.record_type, record.record_id)
        for record, error in event.failed_record_saves:
            add(FAILED_SAVE, record.record_type, record.record_id, error)
        for record_id in event.deleted_record_ids:
            add(DELETED, "", record_id)
        for record_id, error in event.failed_record_deletes:
            add(DELETE_FAILED, "", record_id, error)
        return table
