"""
Field validation, phone formatting and validated prompts.
"""

from .phone import PHONE_DISPLAY_WIDTH, format_phone_for_display
from .prompts import ask_field, get_valid_input
from .rules import (
    ADDRESS_ERROR,
    BIRTHDATE_ERROR,
    EMAIL_ERROR,
    FIELD_NAMES,
    FIELD_RULES,
    NAME_ERROR,
    PHONE_ERROR,
    FieldRule,
    get_rule,
    is_valid_address,
    is_valid_birthdate,
    is_valid_email,
    is_valid_name,
    is_valid_phone,
)

__all__ = [
    # Predicates
    "is_valid_name",
    "is_valid_phone",
    "is_valid_email",
    "is_valid_address",
    "is_valid_birthdate",
    # Rules and messages
    "FieldRule",
    "FIELD_RULES",
    "FIELD_NAMES",
    "get_rule",
    "NAME_ERROR",
    "PHONE_ERROR",
    "EMAIL_ERROR",
    "ADDRESS_ERROR",
    "BIRTHDATE_ERROR",
    # Formatting
    "format_phone_for_display",
    "PHONE_DISPLAY_WIDTH",
    # Prompts
    "get_valid_input",
    "ask_field",
]
