"""
Main menu commands.

File: cli/commands.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from enum import Enum
from typing import Optional


class Command(Enum):
    ADD = "1"
    SEARCH = "2"
    DELETE = "3"
    MODIFY = "4"
    LIST = "5"
    EXIT = "6"

    @property
    def label(self) -> str:
        return MENU_LABELS[self]


MENU_LABELS = {
    Command.ADD: "Add Contact",
    Command.SEARCH: "Search Contact",
    Command.DELETE: "Delete Contact",
    Command.MODIFY: "Modify Contact",
    Command.LIST: "List All Contacts",
    Command.EXIT: "Exit",
}


def parse_command(text: str) -> Optional[Command]:
    """Map a menu choice like "3" to its Command, or None if it isn't one."""
    try:
        return Command(text.strip())
    except ValueError:
        return None
