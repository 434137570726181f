"""Human-readable formatting of byte counts using binary (1024) units."""

from __future__ import annotations

import operator

from iconworks.errors import ByteCountOutOfRange

UNITS = ("bytes", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")

__all__ = ["UNITS", "format_bytecount", "select_unit"]


def select_unit(magnitude: int) -> int:
    """Index into :data:`UNITS` of the largest unit not exceeding *magnitude*.

    Scans upwards, picking the first unit ``u`` with
    ``magnitude >> (10 * (u + 1)) == 0``; integer shifts keep the boundary
    exact where a logarithm would not.
    """
    magnitude = operator.index(magnitude)
    if magnitude < 0:
        raise ByteCountOutOfRange(magnitude)
    for unit in range(len(UNITS)):
        if magnitude >> (10 * (unit + 1)) == 0:
            return unit
    raise ByteCountOutOfRange(magnitude)


def format_bytecount(magnitude: int, precision: int = 0) -> str:
    """Render *magnitude* bytes as e.g. ``"1.5 KiB"``.

    With ``precision == 0`` the value is shifted down to the unit, so the
    number shown is the floor of the true ratio (``2047`` -> ``"1 KiB"``).
    Otherwise the value is divided as a float and rounded to *precision*
    decimals with Python's correctly rounded ``format``.

    Raises :class:`~iconworks.errors.ByteCountOutOfRange` for negative values
    and values of ``1024 ** 7`` or more.
    """
    precision = operator.index(precision)
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")

    magnitude = operator.index(magnitude)
    unit = select_unit(magnitude)

    if precision == 0:
        value = str(magnitude >> (10 * unit))
    else:
        value = f"{float(magnitude) / float(1024 ** unit):.{precision}f}"
    return f"{value} {UNITS[unit]}"
