"""
In-memory contact store.

An ordered list of contacts with linear lookups. Insertion order is kept and
no field is unique; name lookups are exact and the first match wins.

File: store/contacts.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
from typing import Iterator, List, Optional

from ..exceptions import ContactNotFoundError, EmptySearchTermError
from ..models import Contact
from ..validation.rules import FIELD_NAMES

log = logging.getLogger(__name__)


class ContactStore:
    """Session-owned sequence of contacts."""

    def __init__(self, contacts: Optional[List[Contact]] = None):
        self._contacts: List[Contact] = list(contacts or [])

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self._contacts)

    def is_empty(self) -> bool:
        return not self._contacts

    def all(self) -> List[Contact]:
        """Copy of the contacts in insertion order."""
        return list(self._contacts)

    def add(self, contact: Contact) -> None:
        self._contacts.append(contact)
        log.info(f"Added contact '{contact.name}' ({len(self._contacts)} total)")

    def find_by_name(self, name: str) -> Optional[Contact]:
        """Return the first contact whose name equals `name` exactly, or None."""
        for contact in self._contacts:
            if contact.name == name:
                return contact
        log.debug(f"No contact named '{name}'")
        return None

    def delete(self, name: str) -> Contact:
        """
        Remove the first contact named exactly `name`.

        Returns:
            The removed contact

        Raises:
            ContactNotFoundError: No contact has that name; the store is unchanged
        """
        for i, contact in enumerate(self._contacts):
            if contact.name == name:
                del self._contacts[i]
                log.info(f"Deleted contact '{name}' ({len(self._contacts)} left)")
                return contact
        raise ContactNotFoundError(name)

    def search(self, term: str) -> List[Contact]:
        """
        Case-insensitive substring search over every field of every contact.

        Matches are returned in store order. Phones are matched in their raw
        stored form, not the display form.

        Raises:
            EmptySearchTermError: `term` is empty
        """
        if not term:
            raise EmptySearchTermError()

        needle = term.casefold()
        results = [
            contact
            for contact in self._contacts
            if any(needle in value.casefold() for value in contact.fields())
        ]
        log.debug(f"Search '{term}' matched {len(results)} of {len(self._contacts)}")
        return results

    def update(self, name: str, /, **fields: Optional[str]) -> Contact:
        """
        Change the given fields of the contact named exactly `name`.

        `name` is positional-only, so a new name is passed as `name=...`
        alongside it.

        Fields passed as None or "" keep their current value. All supplied
        values are validated before any is applied, so a bad value leaves the
        contact untouched.

        Returns:
            The updated contact (the same object, modified in place)

        Raises:
            ContactNotFoundError: No contact has that name
            ValueError: An unknown field name was passed
            pydantic.ValidationError: A supplied value breaks its field rule
        """
        unknown = set(fields) - set(FIELD_NAMES)
        if unknown:
            raise ValueError(f"Unknown contact fields: {', '.join(sorted(unknown))}")

        contact = self.find_by_name(name)
        if contact is None:
            raise ContactNotFoundError(name)

        changes = {key: value for key, value in fields.items() if value}
        if not changes:
            return contact

        # Raises before anything is assigned
        Contact(**{**contact.model_dump(), **changes})

        for key, value in changes.items():
            setattr(contact, key, value)

        log.info(f"Updated contact '{name}': {', '.join(changes)}")
        return contact
