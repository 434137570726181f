"""Palette colour model used by icon definitions and colour schemes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Sequence, Union

from iconworks.errors import ColorSpecError

__all__ = [
    "AnsiColor",
    "Color",
    "NamedColor",
    "RgbColor",
    "color_to_json",
    "parse_color",
]


class NamedColor(str, Enum):
    """The 16 standard terminal colours plus the terminal default."""

    RESET = "reset"
    BLACK = "black"
    DARK_GREY = "dark_grey"
    RED = "red"
    DARK_RED = "dark_red"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    YELLOW = "yellow"
    DARK_YELLOW = "dark_yellow"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    MAGENTA = "magenta"
    DARK_MAGENTA = "dark_magenta"
    CYAN = "cyan"
    DARK_CYAN = "dark_cyan"
    WHITE = "white"
    GREY = "grey"


@dataclass(frozen=True)
class RgbColor:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for component in (self.r, self.g, self.b):
            if isinstance(component, bool) or not isinstance(component, int):
                raise ColorSpecError((self.r, self.g, self.b), "RGB components must be integers")
            if not 0 <= component <= 255:
                raise ColorSpecError((self.r, self.g, self.b), "RGB components must be 0-255")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class AnsiColor:
    """An entry of the 256-colour ANSI palette."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ColorSpecError(self.value, "ANSI colour value must be an integer")
        if not 0 <= self.value <= 255:
            raise ColorSpecError(self.value, "ANSI colour value must be 0-255")


Color = Union[NamedColor, RgbColor, AnsiColor]

_NAME_LOOKUP = {member.value.replace("_", ""): member for member in NamedColor}
_RGB_TAGS = {"rgb"}
_ANSI_TAGS = {"ansi", "ansivalue", "ansi_value"}


def _normalise_name(name: str) -> str:
    return "".join(ch for ch in name.lower() if ch not in "_- ")


def _parse_rgb_mapping(spec: Mapping[str, Any], original: object) -> RgbColor:
    lowered = {str(key).lower(): value for key, value in spec.items()}
    try:
        return RgbColor(lowered["r"], lowered["g"], lowered["b"])
    except KeyError as exc:
        raise ColorSpecError(original, f"RGB mapping is missing {exc.args[0]!r}") from exc


def parse_color(spec: object) -> Color:
    """Convert a raw colour spec from a data file into a palette colour.

    Accepted forms: a colour name (``"DarkRed"``, ``"dark_red"``), a 3-item
    sequence ``[r, g, b]``, a mapping ``{r, g, b}``, a tagged mapping
    ``{rgb: {...}}`` / ``{rgb: [...]}``, or ``{ansi: N}``.
    """
    if isinstance(spec, (NamedColor, RgbColor, AnsiColor)):
        return spec

    if isinstance(spec, str):
        member = _NAME_LOOKUP.get(_normalise_name(spec))
        if member is None:
            raise ColorSpecError(spec, "unknown colour name")
        return member

    if isinstance(spec, Mapping):
        if len(spec) == 1:
            (tag, payload), = spec.items()
            tag_key = str(tag).lower()
            if tag_key in _RGB_TAGS:
                if isinstance(payload, Mapping):
                    return _parse_rgb_mapping(payload, spec)
                return _parse_rgb_sequence(payload, spec)
            if tag_key in _ANSI_TAGS:
                return AnsiColor(payload)
        return _parse_rgb_mapping(spec, spec)

    if isinstance(spec, Sequence) and not isinstance(spec, (bytes, bytearray)):
        return _parse_rgb_sequence(spec, spec)

    raise ColorSpecError(spec)


def _parse_rgb_sequence(payload: object, original: object) -> RgbColor:
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes, bytearray)):
        raise ColorSpecError(original)
    if len(payload) != 3:
        raise ColorSpecError(original, "RGB triples need exactly 3 components")
    r, g, b = payload
    return RgbColor(r, g, b)


def color_to_json(color: Color) -> Any:
    """JSON-friendly form of *color*, accepted back by :func:`parse_color`."""
    if isinstance(color, NamedColor):
        return color.value
    if isinstance(color, RgbColor):
        return list(color.as_tuple())
    return {"ansi": color.value}
