"""
Table value type, validating factory, column sorting and pretty printing.

A rendered table looks like::

    +----------------------------------------+
    |              Transactions              |
    +----------------------------------------+
    | date | amount | source       | status  |
    +------+--------+--------------+---------+
    | 1    | 4.95   | Cafe Venetia | Success |
    | 2    | 12.65  | Sprout       | Success |
    | 3    | 4.75   | Caltrain     | Pending |
    +------+--------+--------------+---------+
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from boxtable._utils import _cell_str, _log_event, _record_fields
from boxtable.alignment import Alignment
from boxtable.exceptions import InvalidArgument
from boxtable.formatters import border_row, column_widths, format_row


def make_table(columns: Iterable[str], rows: Iterable[object], name: str = "") -> Table:
    """Build a Table from column names and arbitrary records.

    Each record is flattened positionally (see ``_record_fields``) and every
    field is stringified; None becomes an empty cell. Only the first record's
    arity is checked against the columns, later records are trusted.

    Raises InvalidArgument on empty columns, empty rows or arity mismatch.
    """
    columns = [str(c) for c in columns]
    records = [_record_fields(r, columns) for r in rows]
    if not columns:
        raise InvalidArgument("[ERROR] columns cannot be empty")
    if not records:
        raise InvalidArgument("[ERROR] rows cannot be empty")
    if len(columns) != len(records[0]):
        raise InvalidArgument(
            f"[ERROR] columns length must match rows arity ({len(columns)}!={len(records[0])})"
        )
    table = Table(
        columns=tuple(columns),
        rows=tuple(tuple(_cell_str(v) for v in fields) for fields in records),
        name=name or "",
    )
    _log_event(event="make_table", columns=len(table.columns), rows=len(table.rows), name=name)
    return table


def _permute(cells, order):
    """Reorder *cells* by *order*; positions past the end are dropped, extra cells kept last."""
    head = [cells[i] for i in order if i < len(cells)]
    return tuple(head) + tuple(cells[len(order) :])


@dataclass(frozen=True)
class Table:
    """Immutable table of string cells with an optional title.

    The constructor copies its inputs into tuples but does not validate them;
    use make_table() for checked construction.
    """

    columns: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "rows", tuple(tuple(r) for r in self.rows))

    # --- Sorting ---

    def _sort_columns(self, ascending: bool) -> Table:
        order = sorted(range(len(self.columns)), key=lambda i: self.columns[i])
        columns = tuple(self.columns[i] for i in order)
        rows = tuple(_permute(row, order) for row in self.rows)
        if not ascending:
            columns = columns[::-1]
            rows = tuple(row[::-1] for row in rows)
        return Table(columns=columns, rows=rows, name=self.name)

    def sort_columns_asc(self) -> Table:
        """New table with columns (and each row's cells) in name order."""
        return self._sort_columns(ascending=True)

    def sort_columns_desc(self) -> Table:
        """Reverse of sort_columns_asc(), columns and cells alike.

        Same as a descending name sort only when column names are unique.
        """
        return self._sort_columns(ascending=False)

    # --- Rendering ---

    def pretty_string(
        self,
        name_alignment: Alignment | str = Alignment.CENTER,
        column_alignments: Mapping[str, Alignment | str] | None = None,
        default_column_alignment: Alignment | str = Alignment.LEFT,
    ) -> str:
        """Render the table as bordered, aligned text.

        Args:
            name_alignment: title alignment.
            column_alignments: column name -> alignment for header and cells.
            default_column_alignment: alignment for columns missing from
                column_alignments.

        Alignments may also be given by name ("left", "right", "center").
        An unknown name raises InvalidArgument; with Alignment values
        rendering cannot fail.
        """
        name_align = Alignment.from_name(name_alignment)
        default_align = Alignment.from_name(default_column_alignment)
        overrides = {k: Alignment.from_name(v) for k, v in (column_alignments or {}).items()}

        def alignment_for(i):
            if i < len(self.columns):
                return overrides.get(self.columns[i], default_align)
            return default_align

        widths = column_widths(self.columns, self.rows)
        bracket = border_row(widths)
        row_width = len(bracket) - 4
        title_bracket = border_row([row_width])

        lines = []
        if self.name:
            lines.append(title_bracket)
            lines.append(format_row([self.name], [row_width], lambda _i: name_align))
        lines.append(title_bracket)
        lines.append(format_row(self.columns, widths, alignment_for))
        lines.append(bracket)
        lines.extend(format_row(row, widths, alignment_for) for row in self.rows)
        lines.append(bracket)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.pretty_string()
