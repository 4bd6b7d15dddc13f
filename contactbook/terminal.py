"""
Terminal input/output boundary.

The menu loop and prompt helpers only talk to a `Terminal`, so they can be
driven by scripted input in tests. `RichTerminal` is the real implementation.

File: terminal.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from typing import Optional, Protocol

from rich.console import Console


class Terminal(Protocol):
    """Line-oriented terminal used by the interactive session."""

    def ask(self, prompt: str) -> str:
        """Show `prompt` and return one line of input without the newline."""
        ...

    def show(self, text: str = "") -> None:
        """Write `text` followed by a newline."""
        ...

    def clear(self) -> None:
        """Clear the screen."""
        ...


class RichTerminal:
    """Terminal backed by a rich Console."""

    def __init__(self, console: Optional[Console] = None, clear_screen: bool = True):
        self.console = console or Console()
        self.clear_screen = clear_screen

    def ask(self, prompt: str) -> str:
        # Prompts contain user data like "[Juan]" or ":house:", shown verbatim
        return self.console.input(prompt, markup=False, emoji=False)

    def show(self, text: str = "") -> None:
        # Tables are wider than most terminals; rows must not wrap
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def clear(self) -> None:
        if self.clear_screen:
            self.console.clear()
