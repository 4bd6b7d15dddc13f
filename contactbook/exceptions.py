"""
Exceptions raised by the contact book.

File: exceptions.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""


class ContactBookError(Exception):
    """Base class for contact book errors."""


class ContactNotFoundError(ContactBookError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Contact not found: {name!r}")


class EmptySearchTermError(ContactBookError):
    def __init__(self):
        super().__init__("Search term cannot be empty")
