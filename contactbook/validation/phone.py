"""
Phone number display formatting.

Stored numbers stay in the local "09XXXXXXXXX" form; the table shows them in
an international style, e.g. "09244561530" -> "+63 (924) 456 1530".

File: validation/phone.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging

import phonenumbers

from .rules import is_valid_phone

log = logging.getLogger(__name__)

DEFAULT_REGION = "PH"
NATIONAL_NUMBER_LENGTH = 10

# Column width reserved for a formatted number in the contact table
PHONE_DISPLAY_WIDTH = 20


def format_phone_for_display(phone: str, default_region: str = DEFAULT_REGION) -> str:
    """
    Format a local mobile number for display.

    Args:
        phone: Raw number, expected as 11 digits starting with '09'
        default_region: Region used to strip the national prefix (default: "PH")

    Returns:
        "+<country code> (XXX) XXX XXXX", or the input unchanged if it is not
        a conforming local number

    Examples:
        >>> format_phone_for_display("09244561530")
        '+63 (924) 456 1530'
        >>> format_phone_for_display("12345")
        '12345'
    """
    if not is_valid_phone(phone):
        return phone

    try:
        parsed = phonenumbers.parse(phone, default_region)
    except phonenumbers.NumberParseException as e:
        log.debug(f"Could not parse phone number '{phone}': {e}")
        return phone

    national = str(parsed.national_number)
    if len(national) != NATIONAL_NUMBER_LENGTH:
        log.debug(f"Unexpected national number '{national}' for '{phone}'")
        return phone

    return f"+{parsed.country_code} ({national[:3]}) {national[3:6]} {national[6:]}"
