"""
Validate-or-retry input prompts.

File: validation/prompts.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
from typing import Callable

from ..terminal import Terminal
from .rules import FieldRule

log = logging.getLogger(__name__)


def get_valid_input(
    terminal: Terminal,
    prompt: str,
    predicate: Callable[[str], bool],
    error_message: str,
    allow_empty: bool = False,
) -> str:
    """
    Ask for input until it passes `predicate`.

    Args:
        terminal: Where to prompt and read
        prompt: Prompt text shown before each attempt
        predicate: Returns True for acceptable input
        error_message: Shown as "Error: <message>" after a rejected attempt
        allow_empty: Accept an empty line as-is (used to keep a current value)

    Returns:
        The accepted line, or "" if `allow_empty` and the user pressed Enter
    """
    while True:
        value = terminal.ask(prompt)
        if allow_empty and value == "":
            return value
        if predicate(value):
            return value
        log.debug(f"Rejected input for prompt {prompt!r}")
        terminal.show()
        terminal.show(f"Error: {error_message}")
        terminal.show()


def ask_field(terminal: Terminal, rule: FieldRule, prompt: str, allow_empty: bool = False) -> str:
    """Prompt for one contact field using its validation rule."""
    return get_valid_input(
        terminal,
        prompt,
        rule.predicate,
        rule.error_message,
        allow_empty=allow_empty,
    )
