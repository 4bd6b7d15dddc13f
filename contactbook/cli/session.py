"""
Interactive contact book session.

Runs the main menu loop: show the menu, parse a choice into a Command and
dispatch it to one handler. Every handler is a single synchronous round-trip
that ends with "Press Enter to continue..." before returning to the menu.

File: cli/session.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
from typing import Callable, Dict, Optional

from ..config import AppConfig
from ..exceptions import ContactNotFoundError, EmptySearchTermError
from ..models import Contact
from ..presenter import render_header, render_table
from ..store import ContactStore
from ..terminal import Terminal
from ..validation import FIELD_RULES, ask_field
from .commands import Command, parse_command

log = logging.getLogger(__name__)

APP_TITLE = "CONTACT BOOK MANAGEMENT SYSTEM"

# Prompts used when adding a contact, keyed by field
ADD_PROMPTS = {
    "name": "Enter name: ",
    "phone": "Enter phone number (11 digits starting with '09'): ",
    "email": "Enter email: ",
    "address": "Enter address: ",
    "birthdate": "Enter birthdate (DD/MM/YYYY): ",
}

EMPTY_BOOK_MESSAGE = "\nNo contacts in address book!"


class ContactBookSession:
    """One interactive session; owns its ContactStore."""

    def __init__(
        self,
        terminal: Terminal,
        store: Optional[ContactStore] = None,
        config: Optional[AppConfig] = None,
    ):
        self.terminal = terminal
        self.store = store if store is not None else ContactStore()
        self.config = config or AppConfig()

        self.handlers: Dict[Command, Callable[[], object]] = {
            Command.ADD: self.add_contact,
            Command.SEARCH: self.search_contact,
            Command.DELETE: self.delete_contact,
            Command.MODIFY: self.modify_contact,
            Command.LIST: self.list_contacts,
        }

    # ---------- screen helpers ----------
    def _show_screen(self, title: str):
        self.terminal.clear()
        self.terminal.show(render_header(title, self.config.banner_width))

    def _pause(self):
        self.terminal.ask("\nPress Enter to continue...")

    def _show_current_contacts(self):
        self.terminal.show("\nCurrent Contacts:\n")
        self.terminal.show(render_table(self.store.all()))

    def _ask_retry(self) -> bool:
        self.terminal.show("\nContact not found!")
        answer = self.terminal.ask("Would you like to try again? (Y/N): ")
        return answer.strip().upper() == "Y"

    def show_menu(self):
        self._show_screen(APP_TITLE)
        self.terminal.show()
        for command in Command:
            self.terminal.show(f"{command.value}. {command.label}")

    # ---------- actions ----------
    def add_contact(self) -> Contact:
        self._show_screen("ADD NEW CONTACT")

        values = {
            rule.field: ask_field(self.terminal, rule, ADD_PROMPTS[rule.field])
            for rule in FIELD_RULES
        }
        contact = Contact(**values)
        self.store.add(contact)

        self.terminal.show("\nContact added successfully!")
        self._pause()
        return contact

    def search_contact(self):
        self._show_screen("SEARCH CONTACT")

        term = self.terminal.ask("Enter search term: ")
        try:
            results = self.store.search(term)
        except EmptySearchTermError:
            self.terminal.show("\nSearch term cannot be empty!")
            self._pause()
            return []

        if not results:
            self.terminal.show("\nNo contacts found matching your search.")
        else:
            self.terminal.show(f"\nFound {len(results)} matching contact(s):\n")
            self.terminal.show(render_table(results))

        self._pause()
        return results

    def delete_contact(self) -> bool:
        while True:
            self._show_screen("DELETE CONTACT")

            if self.store.is_empty():
                self.terminal.show(EMPTY_BOOK_MESSAGE)
                self._pause()
                return False

            self._show_current_contacts()
            name = self.terminal.ask("\nEnter contact name to delete (or 'Q' to go back): ")
            if name.upper() == "Q":
                return False

            try:
                self.store.delete(name)
            except ContactNotFoundError:
                if not self._ask_retry():
                    return False
                continue

            self.terminal.show("\nContact deleted successfully!")
            self._pause()
            return True

    def modify_contact(self) -> bool:
        while True:
            self._show_screen("MODIFY CONTACT")

            if self.store.is_empty():
                self.terminal.show(EMPTY_BOOK_MESSAGE)
                self._pause()
                return False

            self._show_current_contacts()
            name = self.terminal.ask("\nEnter contact name to modify (or 'Q' to go back): ")
            if name.upper() == "Q":
                return False

            contact = self.store.find_by_name(name)
            if contact is None:
                if not self._ask_retry():
                    return False
                continue

            self.terminal.show("\nSelected contact details:")
            self.terminal.show(render_table([contact]))
            self.terminal.show("\nEnter new details (press Enter to keep current value):")

            # Empty input keeps the current value
            changes = {
                rule.field: ask_field(
                    self.terminal,
                    rule,
                    f"{rule.label} [{getattr(contact, rule.field)}]: ",
                    allow_empty=True,
                )
                for rule in FIELD_RULES
            }
            self.store.update(name, **changes)

            self.terminal.show("\nContact modified successfully!")
            self._pause()
            return True

    def list_contacts(self):
        self._show_screen("LIST ALL CONTACTS")

        if self.store.is_empty():
            self.terminal.show(EMPTY_BOOK_MESSAGE)
        else:
            self.terminal.show(render_table(self.store.all()))

        self._pause()

    # ---------- main loop ----------
    def run(self) -> int:
        """Run the menu loop until the user exits. Returns the exit code."""
        try:
            while True:
                self.show_menu()
                choice = self.terminal.ask("\nEnter your choice (1-6): ")
                command = parse_command(choice)

                if command is None:
                    log.debug(f"Invalid menu choice {choice!r}")
                    self.terminal.ask("\nInvalid choice! Press Enter to continue...")
                    continue

                if command is Command.EXIT:
                    break

                self.handlers[command]()
        except (EOFError, KeyboardInterrupt):
            log.info("Input closed, ending session")
            self.terminal.show()

        self.terminal.show("\nThank you for using Contact Book Management System!")
        return 0
