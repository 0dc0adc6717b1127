"""
boxtable exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class TableError(Exception):
    """Base class for every error raised by boxtable."""


class InvalidArgument(TableError, ValueError):
    """Bad construction input: empty columns or rows, arity mismatch, unknown alignment."""
