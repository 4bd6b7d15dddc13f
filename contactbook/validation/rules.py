"""
Field validation rules for contact records.

Each rule is a pure predicate over the raw string a user typed. Nothing is
stripped or normalized here; callers validate exactly what they will store.

File: validation/rules.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import re
from typing import Callable, List, NamedTuple

MAX_TEXT_LENGTH = 100
MIN_NAME_LENGTH = 2
MIN_ADDRESS_LENGTH = 5

PHONE_LENGTH = 11
PHONE_PREFIX = "09"

MIN_BIRTH_YEAR = 1900
MAX_BIRTH_YEAR = 2025

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
BIRTHDATE_PATTERN = re.compile(r"([0-9]{2})/([0-9]{2})/([0-9]{4})")

# Error messages shown when a prompt rejects input
NAME_ERROR = (
    f"Name must be between {MIN_NAME_LENGTH} and {MAX_TEXT_LENGTH} characters.\n"
    "Name must contain only letters and spaces."
)
PHONE_ERROR = "Phone number must be 11 digits starting with '09' (e.g., 09244561530)"
EMAIL_ERROR = "Invalid email format. Example: user@domain.com"
BIRTHDATE_ERROR = "Birthdate must be in format: DD/MM/YYYY"
ADDRESS_ERROR = (
    f"Address must be between {MIN_ADDRESS_LENGTH} and {MAX_TEXT_LENGTH} characters."
)


def is_valid_name(name: str) -> bool:
    """Letters and spaces only, 2 to 100 characters."""
    if not MIN_NAME_LENGTH <= len(name) <= MAX_TEXT_LENGTH:
        return False
    # Any Unicode letter counts, not just ASCII (e.g. "Peña")
    return all(ch.isalpha() or ch == " " for ch in name)


def is_valid_phone(phone: str) -> bool:
    """Exactly 11 digits starting with '09' (Philippine mobile format)."""
    if len(phone) != PHONE_LENGTH or not phone.startswith(PHONE_PREFIX):
        return False
    return all(ch in "0123456789" for ch in phone)


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_address(address: str) -> bool:
    return MIN_ADDRESS_LENGTH <= len(address) <= MAX_TEXT_LENGTH


def is_valid_birthdate(date: str) -> bool:
    """
    Validate a DD/MM/YYYY birthdate.

    Only the ranges are checked: day 1-31, month 1-12, year 1900-2025.
    Days per month and leap years are not, so "31/02/2000" and "29/02/2021"
    are both accepted.
    """
    match = BIRTHDATE_PATTERN.fullmatch(date)
    if match is None:
        return False

    day, month, year = (int(part) for part in match.groups())

    if not 1 <= month <= 12:
        return False
    if not 1 <= day <= 31:
        return False
    if not MIN_BIRTH_YEAR <= year <= MAX_BIRTH_YEAR:
        return False

    return True


class FieldRule(NamedTuple):
    """Binds a contact field to its label, predicate and error message."""

    field: str
    label: str
    predicate: Callable[[str], bool]
    error_message: str


# Column order used by prompts, search and the table renderer
FIELD_RULES: List[FieldRule] = [
    FieldRule("name", "Name", is_valid_name, NAME_ERROR),
    FieldRule("phone", "Phone", is_valid_phone, PHONE_ERROR),
    FieldRule("email", "Email", is_valid_email, EMAIL_ERROR),
    FieldRule("address", "Address", is_valid_address, ADDRESS_ERROR),
    FieldRule("birthdate", "Birthdate", is_valid_birthdate, BIRTHDATE_ERROR),
]

FIELD_NAMES = [rule.field for rule in FIELD_RULES]


def get_rule(field: str) -> FieldRule:
    """Look up the rule for a field name, raising KeyError if unknown."""
    for rule in FIELD_RULES:
        if rule.field == field:
            return rule
    raise KeyError(field)
