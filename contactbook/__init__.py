"""
Contact Book: an in-memory address book with a text menu.
"""

__version__ = "0.1.0"
