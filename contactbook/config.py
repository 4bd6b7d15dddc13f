"""
Runtime configuration for the contact book.

File: config.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

ENV_PREFIX = "CONTACTBOOK_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Expected a boolean, got {value!r}")


@dataclass
class AppConfig:
    """Settings for an interactive session."""

    clear_screen: bool = True  # Clear the terminal before each screen
    log_level: str = "WARNING"  # Keeps log lines out of the menu by default
    banner_width: int = 50

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        if self.banner_width < 1:
            raise ValueError("banner_width must be positive")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Build a config from the environment (and a .env file, if present).

        Reads CONTACTBOOK_CLEAR_SCREEN and CONTACTBOOK_LOG_LEVEL. Unset
        variables keep their defaults.
        """
        load_dotenv()

        kwargs = {}
        clear_screen = os.getenv(f"{ENV_PREFIX}CLEAR_SCREEN")
        if clear_screen is not None:
            kwargs["clear_screen"] = _parse_bool(clear_screen)
        log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            kwargs["log_level"] = log_level

        return cls(**kwargs)
