"""Shared fixtures for reminder tests."""

from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

import pytest

from sms_reminder.config import SipgateCredentials
from sms_reminder.models import Contact


class StubDirectory:
    """In-memory contact directory keyed by email."""

    def __init__(self, phones):
        self.phones = phones
        self.lookups = []

    def resolve(self, email):
        self.lookups.append(email)
        if email not in self.phones:
            return None
        return Contact(mobile_phone=self.phones[email])


@pytest.fixture
def berlin():
    return ZoneInfo("Europe/Berlin")


@pytest.fixture
def credentials():
    return SipgateCredentials(token_id="token-id", token="secret")


@pytest.fixture
def calendar_service():
    """Calendar API mock with one existing notification calendar and no events."""
    service = MagicMock()
    service.calendarList.return_value.list.return_value.execute.return_value = {
        "items": [{"id": "cal-1", "summary": "SmsNotification"}]
    }
    service.events.return_value.list.return_value.execute.return_value = {"items": []}
    return service


def set_events(service, items):
    service.events.return_value.list.return_value.execute.return_value = {"items": items}
