from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class Event:
    event_id: str
    summary: str
    start: datetime
    guests: List[str] = field(default_factory=list)


@dataclass
class Contact:
    mobile_phone: Optional[str] = None


@dataclass(frozen=True)
class NotificationTarget:
    start: datetime
    phone_number: str
