"""Tests for settings loading and date helpers."""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from sms_reminder.config import SipgateCredentials, get_settings
from sms_reminder.utils import day_bounds, normalize_phone_number, tomorrow


class TestSettings:
    """Test environment-driven settings."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SIPGATE_TOKEN_ID", "token-id")
        monkeypatch.setenv("SIPGATE_TOKEN", "secret")
        monkeypatch.setenv("CALENDAR_NAME", "Praxis")
        monkeypatch.setenv("TIMEZONE", "Europe/Vienna")

        settings = get_settings()

        assert settings.sipgate == SipgateCredentials(token_id="token-id", token="secret", sms_id="s0")
        assert settings.calendar_name == "Praxis"
        assert settings.timezone == ZoneInfo("Europe/Vienna")

    def test_defaults(self, monkeypatch):
        for name in ("CALENDAR_NAME", "TIMEZONE", "SIPGATE_TOKEN_ID", "SIPGATE_TOKEN", "SIPGATE_SMS_ID"):
            monkeypatch.delenv(name, raising=False)

        settings = get_settings()

        assert settings.calendar_name == "SmsNotification"
        assert settings.timezone == ZoneInfo("Europe/Berlin")
        assert not settings.sipgate.complete

    def test_invalid_timezone_falls_back(self, monkeypatch):
        monkeypatch.setenv("TIMEZONE", "Not/AZone")
        assert get_settings().timezone == ZoneInfo("Europe/Berlin")


class TestDateHelpers:
    """Test the tomorrow window."""

    def test_tomorrow(self):
        tz = ZoneInfo("Europe/Berlin")
        assert tomorrow(tz, today=date(2024, 2, 28)) == date(2024, 2, 29)
        assert tomorrow(tz, today=date(2024, 12, 31)) == date(2025, 1, 1)

    def test_tomorrow_defaults_to_now(self):
        tz = ZoneInfo("Europe/Berlin")
        assert (tomorrow(tz) - datetime.now(tz).date()).days == 1

    def test_day_bounds_across_dst_change(self):
        """The window covers the whole local day even on a 23 hour day."""
        tz = ZoneInfo("Europe/Berlin")
        start, end = day_bounds(date(2024, 3, 31), tz)
        assert start.isoformat() == "2024-03-31T00:00:00+01:00"
        assert end.isoformat() == "2024-04-01T00:00:00+02:00"

    def test_normalize_phone_number(self):
        assert normalize_phone_number(" +49 151  234 5678 ") == "+491512345678"
