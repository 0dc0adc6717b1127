"""Single-cell padding rules."""

from boxtable.alignment import Alignment


def format_cell(value, width, alignment, fill=" "):
    """Pad *value* to *width* with *fill* according to *alignment*.

    CENTER puts floor(pad / 2) fill characters on the left and the rest on
    the right, so an odd leftover unit lands on the right side.
    A value already wider than *width* is returned unchanged.
    """
    pad = width - len(value)
    if alignment is Alignment.LEFT:
        return value + fill * pad
    if alignment is Alignment.RIGHT:
        return fill * pad + value
    left = max(pad, 0) // 2
    return (fill * left + value).ljust(width, fill)
