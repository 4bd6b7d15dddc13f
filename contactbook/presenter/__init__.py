"""
Terminal rendering for contacts.
"""

from .table import (
    COLUMN_PADDING,
    HEADERS,
    ColumnWidths,
    compute_column_widths,
    render_header,
    render_table,
)

__all__ = [
    "COLUMN_PADDING",
    "HEADERS",
    "ColumnWidths",
    "compute_column_widths",
    "render_header",
    "render_table",
]
