from __future__ import annotations

import datetime as dt
import logging
from typing import List
from zoneinfo import ZoneInfo

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build

from .models import Event
from .utils import day_bounds, parse_gcal_start

SCOPES = [
    "https://www.googleapis.com/auth/calendar",
    "https://www.googleapis.com/auth/contacts.readonly",
]

CALENDAR_DESCRIPTION = "All events in this calendar will send a sms notification"


def _load_credentials(client_secrets_file: str, token_file: str) -> Credentials:
    creds = None
    if token_file:
        try:
            creds = Credentials.from_authorized_user_file(token_file, SCOPES)
        except (OSError, ValueError):
            creds = None
    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            creds.refresh(Request())
        else:
            flow = InstalledAppFlow.from_client_secrets_file(client_secrets_file, SCOPES)
            creds = flow.run_local_server(port=0)
        with open(token_file, "w") as token:
            token.write(creds.to_json())
    return creds


def build_services(client_secrets_file: str, token_file: str):
    """Return (calendar, people) API clients sharing one set of credentials."""
    creds = _load_credentials(client_secrets_file, token_file)
    calendar = build("calendar", "v3", credentials=creds)
    people = build("people", "v1", credentials=creds)
    return calendar, people


def find_calendars_by_name(service, name: str) -> List[dict]:
    calendars: List[dict] = []
    page_token = None
    while True:
        result = service.calendarList().list(pageToken=page_token).execute()
        calendars.extend(item for item in result.get("items", []) if item.get("summary") == name)
        page_token = result.get("nextPageToken")
        if not page_token:
            break
    return calendars


def ensure_calendar(service, name: str) -> str:
    if not name:
        raise ValueError("Calendar name must not be empty")
    calendars = find_calendars_by_name(service, name)
    if calendars:
        if len(calendars) > 1:
            logging.debug("Found %d calendars named %s, using the first", len(calendars), name)
        return calendars[0]["id"]

    logging.info("Creating calendar %s", name)
    created = service.calendars().insert(body={"summary": name, "description": CALENDAR_DESCRIPTION}).execute()
    return created["id"]


def event_from_gcal(item: dict, tz: ZoneInfo) -> Event:
    guests = [attendee["email"] for attendee in item.get("attendees", []) if attendee.get("email")]
    return Event(
        event_id=item.get("id", ""),
        summary=item.get("summary", ""),
        start=parse_gcal_start(item["start"], tz),
        guests=guests,
    )


def fetch_events_for_day(service, calendar_id: str, day: dt.date, tz: ZoneInfo) -> List[Event]:
    time_min, time_max = day_bounds(day, tz)
    logging.info("Fetching events from %s to %s", time_min, time_max)
    events: List[Event] = []
    page_token = None
    while True:
        events_result = (
            service.events()
            .list(
                calendarId=calendar_id,
                timeMin=time_min.isoformat(),
                timeMax=time_max.isoformat(),
                singleEvents=True,
                orderBy="startTime",
                timeZone=tz.key,
                showDeleted=False,
                pageToken=page_token,
            )
            .execute()
        )
        for item in events_result.get("items", []):
            if item.get("status") == "cancelled":
                continue
            events.append(event_from_gcal(item, tz))
        page_token = events_result.get("nextPageToken")
        if not page_token:
            break
    logging.info("Found %d events on %s", len(events), day)
    return events
