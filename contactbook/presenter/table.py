"""
Plain-text contact table.

Column widths are recomputed from the rows on every call, so the table always
fits its data. Output looks like:

    -------------------------------------------------- ...
    | NAME                | PHONE                    | ...
    -------------------------------------------------- ...
    | Juan Dela Cruz      | +63 (924) 456 1530       | ...
    -------------------------------------------------- ...

File: presenter/table.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from dataclasses import dataclass
from typing import List, Sequence

from ..models import Contact
from ..validation.phone import PHONE_DISPLAY_WIDTH, format_phone_for_display

HEADERS = ["NAME", "PHONE", "EMAIL", "ADDRESS", "BIRTHDATE"]
PHONE_COLUMN = HEADERS.index("PHONE")

# Extra spaces added to every column after fitting its content
COLUMN_PADDING = 4

CELL_SEPARATOR = " | "
ROW_START = "| "
ROW_END = " |"


@dataclass(frozen=True)
class ColumnWidths:
    """Widths of the five table columns, padding included."""

    name: int
    phone: int
    email: int
    address: int
    birthdate: int

    def as_list(self) -> List[int]:
        return [self.name, self.phone, self.email, self.address, self.birthdate]

    @property
    def total(self) -> int:
        """Full row width including borders and cell separators."""
        widths = self.as_list()
        return (
            sum(widths)
            + len(CELL_SEPARATOR) * (len(widths) - 1)
            + len(ROW_START)
            + len(ROW_END)
        )


def display_cells(contact: Contact) -> List[str]:
    """Cell text for one contact; the phone is shown formatted."""
    cells = contact.fields()
    cells[PHONE_COLUMN] = format_phone_for_display(contact.phone)
    return cells


def compute_column_widths(contacts: Sequence[Contact]) -> ColumnWidths:
    """
    Fit each column to its header and its longest cell, plus padding.

    The phone column never drops below the reserved formatted-phone width,
    even with no rows.
    """
    widths = [len(header) for header in HEADERS]
    widths[PHONE_COLUMN] = max(widths[PHONE_COLUMN], PHONE_DISPLAY_WIDTH)

    for contact in contacts:
        for i, cell in enumerate(display_cells(contact)):
            widths[i] = max(widths[i], len(cell))

    return ColumnWidths(*(width + COLUMN_PADDING for width in widths))


def _format_row(cells: Sequence[str], widths: ColumnWidths) -> str:
    padded = [cell.ljust(width) for cell, width in zip(cells, widths.as_list())]
    return ROW_START + CELL_SEPARATOR.join(padded) + ROW_END


def render_table(contacts: Sequence[Contact]) -> str:
    """
    Render contacts as a bordered, pipe-delimited table.

    Args:
        contacts: Rows to show, in display order

    Returns:
        The table as a newline-joined string (no trailing newline)
    """
    widths = compute_column_widths(contacts)
    separator = "-" * widths.total

    lines = [separator, _format_row(HEADERS, widths), separator]
    lines.extend(_format_row(display_cells(contact), widths) for contact in contacts)
    lines.append(separator)

    return "\n".join(lines)


def render_header(title: str, width: int = 50) -> str:
    """A title centered between two rules of '=' characters."""
    rule = "=" * width
    return "\n".join([rule, title.center(width).rstrip(), rule])
