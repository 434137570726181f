"""Recognition of inline ``${cN}`` colour-switch markers in art templates.

A marker is the literal ``${c`` followed by one or more ASCII digits and a
closing brace. ``N`` selects palette entry ``N`` for the text that follows,
up to the next marker. ``${c}`` (no digits) is not a marker and is left in
the text untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Tuple

from iconworks.errors import MalformedMarker

MARKER_PATTERN = re.compile(r"\$\{c([0-9]+)\}")
MAX_INDEX = 255

__all__ = [
    "MARKER_PATTERN",
    "MAX_INDEX",
    "MarkerScan",
    "format_marker",
    "parse_markers",
]


@dataclass(frozen=True)
class MarkerScan:
    """Marker indices and the text chunks surrounding them.

    ``chunks[0]`` is the text before the first marker and ``chunks[i + 1]``
    is the text following the marker whose index is ``indices[i]``.
    """

    indices: Tuple[int, ...]
    chunks: Tuple[str, ...]


def _marker_index(match: re.Match) -> int:
    digits = match.group(1)
    # int() refuses digit strings past sys.get_int_max_str_digits().
    if len(digits.lstrip("0")) > 3 or int(digits) > MAX_INDEX:
        raise MalformedMarker(match.group(0), digits)
    return int(digits)


def _scan(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (index, text before the marker) per marker, then (-1, tail)."""
    position = 0
    for match in MARKER_PATTERN.finditer(text):
        yield _marker_index(match), text[position : match.start()]
        position = match.end()
    yield -1, text[position:]


def parse_markers(text: str) -> MarkerScan:
    """Scan *text* once, returning aligned marker indices and chunks.

    Raises :class:`~iconworks.errors.MalformedMarker` on the first marker
    whose index exceeds 255.
    """
    steps = list(_scan(text))
    return MarkerScan(
        indices=tuple(index for index, _ in steps[:-1]),
        chunks=tuple(chunk for _, chunk in steps),
    )


def format_marker(index: int) -> str:
    if not 0 <= index <= MAX_INDEX:
        raise ValueError(f"Palette index must be 0-{MAX_INDEX}, got {index}")
    return f"${{c{index}}}"
