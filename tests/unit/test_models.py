"""
Tests for the sync event data model.
"""
import dataclasses

import pytest

from synclens.events.models import (
    DEFAULT_OWNER_NAME,
    AccountChange,
    ErrorCode,
    FetchedDatabaseChanges,
    RecordID,
    SentRecordZoneChanges,
    SignIn,
    StateUpdate,
    SyncError,
    UnknownEvent,
    ZoneID,
    ZoneModification,
)


class TestIdentifiers:
    """Identifiers are immutable values."""

    def test_zone_default_owner(self):
        assert ZoneID("Notes").owner_name == DEFAULT_OWNER_NAME

    def test_value_equality(self):
        assert RecordID("N1", ZoneID("Notes")) == RecordID("N1", ZoneID("Notes"))
        assert hash(ZoneID("Notes")) == hash(ZoneID("Notes"))

    def test_frozen(self):
        zone = ZoneID("Notes")
        with pytest.raises(dataclasses.FrozenInstanceError):
            zone.zone_name = "Other"

    def test_zone_modification_shortcuts(self):
        modification = ZoneModification(ZoneID("Trips", "_owner"))
        assert modification.zone_name == "Trips"
        assert modification.owner_name == "_owner"


class TestSyncError:
    """Sub-code resolution."""

    def test_explicit_sub_code(self):
        assert SyncError(ErrorCode.NETWORK_FAILURE, 42).sub_code == 42

    def test_sub_code_defaults_to_code(self):
        assert SyncError(ErrorCode.NETWORK_FAILURE).sub_code == 4

    def test_raw_code(self):
        assert SyncError(512).sub_code == 512


class TestEvents:
    """Event names and descriptions."""

    def test_names(self):
        assert StateUpdate().name == "stateUpdate"
        assert FetchedDatabaseChanges().name == "fetchedDatabaseChanges"
        assert AccountChange(SignIn(RecordID("u"))).name == "accountChange"

    def test_payloads_default_to_empty(self):
        event = SentRecordZoneChanges()
        assert event.saved_records == ()
        assert event.failed_record_deletes == ()

    def test_unknown_event_description(self):
        assert UnknownEvent("didReceiveTombstone").description == "didReceiveTombstone"

    def test_default_description(self):
        assert StateUpdate().description == "StateUpdate()"
