"""Transcoding of raw coloured ASCII-art definitions into renderable art.

A raw definition carries a multi-line template with inline ``${cN}``
markers. Transcoding splits the template at the markers and pairs every
marker's palette index with the text that follows it. Text in front of the
first marker (the preamble) is dropped, so templates are expected to open
with a marker.

Pairing is positional. In the default lenient mode a length mismatch between
markers and chunks is resolved by truncating to the shorter sequence; strict
mode raises :class:`~iconworks.errors.SegmentCountMismatch` instead. A single
marker scan always yields one chunk more than it has markers, so a mismatch
only arises when :func:`pair_segments` is fed sequences from elsewhere.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Sequence, Tuple

from iconworks.errors import ArtDefinitionError, HeightOverflow, SegmentCountMismatch

from .colors import Color, color_to_json, parse_color
from .markers import parse_markers

logger = logging.getLogger(__name__)

MAX_HEIGHT = 0xFFFF
MAX_WIDTH = 0xFFFF

__all__ = [
    "MAX_HEIGHT",
    "MAX_WIDTH",
    "RawArtDefinition",
    "RenderableArt",
    "Segment",
    "count_lines",
    "pair_segments",
    "transcode",
]


@dataclass(frozen=True)
class RawArtDefinition:
    """An icon record as authored in the data file."""

    names: Tuple[str, ...]
    palette: Tuple[Color, ...]
    width: int
    template: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawArtDefinition":
        """Build a definition from a ``{name, colors, width, art}`` record."""
        if not isinstance(data, Mapping):
            raise ArtDefinitionError(f"Icon record must be a mapping, got {type(data).__name__}")

        missing = [key for key in ("name", "colors", "width", "art") if key not in data]
        if missing:
            raise ArtDefinitionError(f"Icon record is missing field(s): {', '.join(missing)}")

        raw_names = data["name"]
        if isinstance(raw_names, str):
            raw_names = [raw_names]
        if not isinstance(raw_names, (list, tuple)) or not all(
            isinstance(name, str) for name in raw_names
        ):
            raise ArtDefinitionError(
                f"Icon record 'name' must be a list of strings, got {raw_names!r}"
            )
        names = tuple(raw_names)
        if not names:
            raise ArtDefinitionError("Icon record needs at least one name")

        colors = data["colors"]
        if isinstance(colors, (str, bytes)) or not isinstance(colors, Iterable):
            raise ArtDefinitionError(f"Icon {names[0]!r}: 'colors' must be a list")
        palette = tuple(parse_color(spec) for spec in colors)

        width = data["width"]
        if isinstance(width, bool) or not isinstance(width, int):
            raise ArtDefinitionError(f"Icon {names[0]!r}: 'width' must be an integer")
        if not 0 <= width <= MAX_WIDTH:
            raise ArtDefinitionError(
                f"Icon {names[0]!r}: width {width} is outside 0..{MAX_WIDTH}"
            )

        template = data["art"]
        if not isinstance(template, str):
            raise ArtDefinitionError(f"Icon {names[0]!r}: 'art' must be a string")

        return cls(names=names, palette=palette, width=width, template=template)


@dataclass(frozen=True)
class Segment:
    """A run of art text drawn with one palette entry."""

    palette_index: int
    text: str


@dataclass(frozen=True)
class RenderableArt:
    names: Tuple[str, ...]
    palette: Tuple[Color, ...]
    width: int
    height: int
    segments: Tuple[Segment, ...]

    def matches(self, name: str) -> bool:
        return name.lower() in self.names

    def to_dict(self) -> Dict[str, Any]:
        return {
            "names": list(self.names),
            "colors": [color_to_json(color) for color in self.palette],
            "width": self.width,
            "height": self.height,
            "segments": [
                {"color": segment.palette_index, "text": segment.text}
                for segment in self.segments
            ],
        }


def count_lines(text: str) -> int:
    """Number of lines in *text*.

    Lines end at ``\\n`` (a preceding ``\\r`` is part of the terminator). A
    final line without a terminator still counts; the empty string has none.
    """
    if not text:
        return 0
    breaks = text.count("\n")
    return breaks if text.endswith("\n") else breaks + 1


def pair_segments(
    indices: Sequence[int], chunks: Sequence[str], *, strict: bool = False
) -> Tuple[Segment, ...]:
    """Pair palette indices with the chunks that follow their markers.

    *chunks* excludes the preamble. Lenient pairing stops at the shorter
    sequence.
    """
    if strict and len(indices) != len(chunks):
        raise SegmentCountMismatch(len(indices), len(chunks))
    return tuple(Segment(index, chunk) for index, chunk in zip(indices, chunks))


def transcode(raw: RawArtDefinition, *, strict: bool = False) -> RenderableArt:
    """Turn a raw definition into :class:`RenderableArt`.

    Raises :class:`~iconworks.errors.MalformedMarker` for marker indices above
    255 and :class:`~iconworks.errors.HeightOverflow` when the template has
    more lines than the height field can hold.
    """
    height = count_lines(raw.template)
    if height > MAX_HEIGHT:
        raise HeightOverflow(height, MAX_HEIGHT)

    scan = parse_markers(raw.template)
    preamble, body = scan.chunks[0], scan.chunks[1:]
    if preamble.strip():
        logger.warning(
            "Discarding text before the first colour marker in icon %r: %r",
            raw.names[0] if raw.names else "?",
            preamble,
        )

    segments = pair_segments(scan.indices, body, strict=strict)
    names = tuple(name.lower() for name in raw.names)

    logger.debug(
        "Transcoded icon %s: %d segments, %dx%d", names, len(segments), raw.width, height
    )
    return RenderableArt(
        names=names,
        palette=tuple(raw.palette),
        width=raw.width,
        height=height,
        segments=segments,
    )
