from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from sms_reminder.config import get_settings
from sms_reminder.contacts import PeopleDirectory
from sms_reminder.gcal import build_services
from sms_reminder.reminders import send_reminders
from sms_reminder.sipgate import SmsSender


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send SMS reminders for tomorrow's calendar events")
    parser.add_argument("--calendar", type=str, default=None, help="Calendar name, overrides CALENDAR_NAME")
    parser.add_argument("--dry-run", action="store_true", help="Log messages without sending them")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

    settings = get_settings()
    sender = SmsSender(settings.sipgate, dry_run=args.dry_run)
    calendar_service, people_service = build_services(settings.google_client_secrets, settings.google_token_file)

    send_reminders(
        calendar_service=calendar_service,
        directory=PeopleDirectory(people_service),
        sender=sender,
        calendar_name=args.calendar or settings.calendar_name,
        tz=settings.timezone,
    )

    logging.info("Done")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
