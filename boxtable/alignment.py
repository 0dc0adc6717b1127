"""Cell alignment policy: where padding goes around a cell's text."""

from enum import Enum

from boxtable.exceptions import InvalidArgument


class Alignment(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @classmethod
    def names(cls):
        """Sorted list of valid alignment names."""
        return sorted(a.value for a in cls)

    @classmethod
    def from_name(cls, value):
        """Resolve an Alignment or a case-insensitive name. Raises InvalidArgument."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise InvalidArgument(
            f"[ERROR] Invalid alignment '{value}'. Valid: {', '.join(cls.names())}"
        )
