"""
Interactive menu for the contact book.
"""

from .commands import Command, parse_command
from .session import ContactBookSession

__all__ = [
    "Command",
    "parse_command",
    "ContactBookSession",
]
