"""
Shared pure-utility helpers for boxtable.

Used by table.py for record flattening and opt-in debug logging.
"""

import dataclasses
import json
import sys
from collections.abc import Mapping

from boxtable import config
from boxtable.exceptions import InvalidArgument


def _log_event(**fields):
    """Emit a structured debug line to stderr when enabled."""
    if not config.DEBUG_LOG_ENABLED:
        return
    print("[TABLE] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _record_fields(record, columns):
    """Return the positional fields of a record as a list.

    Dataclass instances yield their fields in declaration order. Mappings are
    looked up by column name (missing keys give None, other keys are ignored).
    Anything else is iterated as-is (tuples, namedtuples, lists).
    Raises InvalidArgument for values that are not records.
    """
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return [getattr(record, f.name) for f in dataclasses.fields(record)]
    if isinstance(record, Mapping):
        return [record.get(c) for c in columns]
    if isinstance(record, (str, bytes)):
        raise InvalidArgument(f"[ERROR] rows must be records, got {type(record).__name__}")
    try:
        return list(record)
    except TypeError as e:
        raise InvalidArgument(
            f"[ERROR] rows must be records, got {type(record).__name__}"
        ) from e


def _cell_str(value):
    """Stringify one field; None renders as an empty cell."""
    return "" if value is None else str(value)
