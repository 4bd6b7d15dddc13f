"""
Main entry point for Contact Book.

Interactive text menu for adding, searching, deleting, modifying and listing
contacts. Contacts live in memory for the lifetime of the process.

Usage:
    >>> python main.py
    >>> python main.py --no-clear --log-level DEBUG

File: main.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from contactbook.cli import ContactBookSession
from contactbook.config import AppConfig
from contactbook.terminal import RichTerminal

log = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="In-memory contact book")
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the terminal between screens",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: WARNING, or CONTACTBOOK_LOG_LEVEL)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> AppConfig:
    """Environment settings, overridden by command-line flags."""
    config = AppConfig.from_env()
    if args.no_clear:
        config.clear_screen = False
    if args.log_level:
        config = AppConfig(
            clear_screen=config.clear_screen,
            log_level=args.log_level,
            banner_width=config.banner_width,
        )
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ValueError as e:
        Console(stderr=True).print(f"[red]Invalid configuration:[/] {e}")
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
    )
    log.debug(f"Starting session with {config}")

    terminal = RichTerminal(clear_screen=config.clear_screen)
    session = ContactBookSession(terminal, config=config)
    return session.run()


if __name__ == "__main__":
    sys.exit(main())
