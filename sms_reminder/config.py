from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

load_dotenv()

DEFAULT_TIMEZONE = "Europe/Berlin"
DEFAULT_CALENDAR_NAME = "SmsNotification"


@dataclass(frozen=True)
class SipgateCredentials:
    token_id: str
    token: str
    sms_id: str = "s0"

    @property
    def complete(self) -> bool:
        return bool(self.token_id and self.token)


@dataclass
class Settings:
    sipgate: SipgateCredentials
    calendar_name: str
    timezone: ZoneInfo
    google_client_secrets: str
    google_token_file: str


def get_timezone() -> ZoneInfo:
    tz_name = os.getenv("TIMEZONE", DEFAULT_TIMEZONE)
    try:
        return ZoneInfo(tz_name)
    except Exception:
        logging.warning("Invalid TIMEZONE %s, falling back to %s", tz_name, DEFAULT_TIMEZONE)
        return ZoneInfo(DEFAULT_TIMEZONE)


def get_settings() -> Settings:
    settings = Settings(
        sipgate=SipgateCredentials(
            token_id=os.getenv("SIPGATE_TOKEN_ID", ""),
            token=os.getenv("SIPGATE_TOKEN", ""),
            sms_id=os.getenv("SIPGATE_SMS_ID", "s0"),
        ),
        calendar_name=os.getenv("CALENDAR_NAME", DEFAULT_CALENDAR_NAME),
        timezone=get_timezone(),
        google_client_secrets=os.getenv("GOOGLE_CLIENT_SECRETS", "credentials.json"),
        google_token_file=os.getenv("GOOGLE_TOKEN_FILE", "token.json"),
    )
    if not settings.sipgate.token_id:
        logging.warning("SIPGATE_TOKEN_ID is not set")
    if not settings.sipgate.token:
        logging.warning("SIPGATE_TOKEN is not set")
    return settings
