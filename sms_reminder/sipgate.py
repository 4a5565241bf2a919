from __future__ import annotations

import base64
import logging
from datetime import datetime

import requests

from .config import SipgateCredentials
from .utils import normalize_phone_number

SMS_URL = "https://api.sipgate.com/v2/sessions/sms"
MESSAGE_TEMPLATE = "Bitte denken Sie an Ihren Termin am {date} um {time} Uhr."


def format_message(when: datetime) -> str:
    return MESSAGE_TEMPLATE.format(date=when.strftime("%d.%m.%Y"), time=when.strftime("%H:%M"))


def basic_auth_value(credentials: SipgateCredentials) -> str:
    raw = f"{credentials.token_id}:{credentials.token}".encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


class SmsSender:
    """Sends reminder texts through the sipgate REST API.

    Every call to :meth:`send` is one billable SMS; nothing is retried.
    With ``dry_run`` the request is logged instead of sent.
    """

    def __init__(self, credentials: SipgateCredentials, dry_run: bool = False):
        if not dry_run and not credentials.complete:
            raise ValueError("sipgate token id and token are required")
        self.credentials = credentials
        self.dry_run = dry_run

    def build_request(self, when: datetime, phone_number: str) -> tuple[dict, dict]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Basic {basic_auth_value(self.credentials)}",
        }
        body = {
            "smsId": self.credentials.sms_id,
            "recipient": normalize_phone_number(phone_number),
            "message": format_message(when),
        }
        return headers, body

    def send(self, when: datetime, phone_number: str) -> None:
        headers, body = self.build_request(when, phone_number)
        if self.dry_run:
            logging.info("DRY RUN sms to %s: %s", body["recipient"], body["message"])
            return
        logging.info("Sending sms to %s for %s", body["recipient"], when)
        response = requests.post(SMS_URL, json=body, headers=headers)
        response.raise_for_status()
