"""
Data models for the contact book.
"""

from .contact import Contact

__all__ = [
    "Contact",
]
