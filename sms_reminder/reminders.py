from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional
from zoneinfo import ZoneInfo

from .contacts import ContactDirectory
from .gcal import ensure_calendar, fetch_events_for_day
from .models import Event, NotificationTarget
from .sipgate import SmsSender
from .utils import tomorrow


def targets_for(event: Event, directory: ContactDirectory) -> List[NotificationTarget]:
    targets: List[NotificationTarget] = []
    for email in event.guests:
        contact = directory.resolve(email)
        if contact is None or not contact.mobile_phone:
            logging.debug("Skipping guest %s of %s: no mobile number", email, event.summary)
            continue
        targets.append(NotificationTarget(start=event.start, phone_number=contact.mobile_phone))
    return targets


def send_reminders(
    calendar_service,
    directory: ContactDirectory,
    sender: SmsSender,
    calendar_name: str,
    tz: ZoneInfo,
    today: Optional[date] = None,
) -> int:
    calendar_id = ensure_calendar(calendar_service, calendar_name)
    day = tomorrow(tz, today)
    events = fetch_events_for_day(calendar_service, calendar_id, day, tz)

    sent = 0
    for event in events:
        for target in targets_for(event, directory):
            sender.send(target.start, target.phone_number)
            sent += 1
    logging.info("Sent %d reminders for %s", sent, day)
    return sent
