"""boxtable — render rows of values as aligned, bordered text tables."""

from boxtable.alignment import Alignment
from boxtable.config import VERSION
from boxtable.exceptions import InvalidArgument, TableError
from boxtable.table import Table, make_table

__all__ = [
    "VERSION",
    "Alignment",
    "InvalidArgument",
    "Table",
    "TableError",
    "make_table",
]
