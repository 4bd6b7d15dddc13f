"""
In-memory contact storage.
"""

from .contacts import ContactStore

__all__ = [
    "ContactStore",
]
