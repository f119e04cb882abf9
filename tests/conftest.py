"""
Pytest configuration and fixtures for SyncLens tests
"""

from unittest.mock import Mock

import pytest

from synclens.events.models import RecordID, RecordModification, ZoneID


@pytest.fixture
def zone() -> ZoneID:
    """A zone owned by the default owner"""
    return ZoneID("Notes")


@pytest.fixture
def shared_zone() -> ZoneID:
    """A zone owned by another user"""
    return ZoneID("Trips", "_a1b2c3")


@pytest.fixture
def user(zone) -> RecordID:
    """A user record identifier"""
    return RecordID("_user1", ZoneID("Users", "_owner"))


@pytest.fixture
def note(zone) -> RecordModification:
    """A modified note record"""
    return RecordModification(RecordID("N1", zone), "Note")


@pytest.fixture
def mock_sink() -> Mock:
    """Stand-in for a structlog logger"""
    return Mock()
