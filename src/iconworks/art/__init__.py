"""Coloured ASCII-art icons: marker parsing, transcoding and lookup."""

from .catalog import get_colorscheme, get_icon, load_colorschemes, load_icons
from .colors import AnsiColor, Color, NamedColor, RgbColor, parse_color
from .markers import MarkerScan, parse_markers
from .transcoder import RawArtDefinition, RenderableArt, Segment, transcode

__all__ = [
    "AnsiColor",
    "Color",
    "MarkerScan",
    "NamedColor",
    "RawArtDefinition",
    "RenderableArt",
    "RgbColor",
    "Segment",
    "get_colorscheme",
    "get_icon",
    "load_colorschemes",
    "load_icons",
    "parse_color",
    "parse_markers",
    "transcode",
]
