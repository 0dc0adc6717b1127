"""Row rendering and column width computation."""

from boxtable.alignment import Alignment
from boxtable.formatters._cells import format_cell


def _always_left(_index):
    return Alignment.LEFT


def format_row(values, widths, alignment_for=_always_left, sep="|", fill=" "):
    """Render one bracketed row, e.g. ``| a   | bb |``.

    values: cell strings.
    widths: target width per position; zipped with *values*, extras ignored.
    alignment_for: callable taking the cell position, returning an Alignment.
    sep/fill: "|" and " " for content rows, "+" and "-" for borders.
    """
    cells = [
        format_cell(value, width, alignment_for(i), fill)
        for i, (value, width) in enumerate(zip(values, widths))
    ]
    return f"{sep}{fill}" + f"{fill}{sep}{fill}".join(cells) + f"{fill}{sep}"


def border_row(widths):
    """Dash row with ``+`` corners matching each column width."""
    return format_row([""] * len(widths), widths, sep="+", fill="-")


def column_widths(columns, rows):
    """Element-wise max of header and cell lengths, at least 1 per column.

    Folds every row into a vector seeded with the column-name lengths. A row
    longer than the vector extends it; missing positions count as 0.
    """
    widths = [max(1, len(c)) for c in columns]
    for row in rows:
        for i, cell in enumerate(row):
            if i < len(widths):
                widths[i] = max(widths[i], len(cell))
            else:
                widths.append(len(cell))
    return widths
