from __future__ import annotations

import logging
from typing import Optional, Protocol

from .models import Contact

READ_MASK = "emailAddresses,phoneNumbers"


class ContactDirectory(Protocol):
    def resolve(self, email: str) -> Optional[Contact]:
        ...


def _mobile_phone(person: dict) -> Optional[str]:
    for phone in person.get("phoneNumbers", []):
        if phone.get("type") == "mobile" and phone.get("value"):
            return phone["value"]
    return None


class PeopleDirectory:
    """Looks up the user's Google contacts by email address."""

    def __init__(self, service):
        self.service = service
        self._warmed_up = False

    def _warm_up(self) -> None:
        # searchContacts serves from a cache that an empty query refreshes
        self.service.people().searchContacts(query="", readMask=READ_MASK).execute()
        self._warmed_up = True

    def resolve(self, email: str) -> Optional[Contact]:
        if not self._warmed_up:
            self._warm_up()
        result = self.service.people().searchContacts(query=email, readMask=READ_MASK, pageSize=10).execute()
        wanted = email.lower()
        for match in result.get("results", []):
            person = match.get("person", {})
            addresses = {addr.get("value", "").lower() for addr in person.get("emailAddresses", [])}
            if wanted in addresses:
                return Contact(mobile_phone=_mobile_phone(person))
        logging.debug("No contact found for %s", email)
        return None
