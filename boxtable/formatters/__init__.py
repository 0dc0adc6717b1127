"""Low-level rendering helpers for boxtable.

Re-exports all public names so consumers can do:
    from boxtable.formatters import format_row
"""

from boxtable.formatters._cells import format_cell
from boxtable.formatters._rows import border_row, column_widths, format_row

__all__ = [
    "border_row",
    "column_widths",
    "format_cell",
    "format_row",
]
