"""Icon and colour-scheme tables shipped with iconworks.

The default tables live next to this module in ``data/``:

* ``icons.yaml`` - a list of ``{name, colors, width, art}`` records, each
  transcoded into :class:`~iconworks.art.transcoder.RenderableArt`.
* ``flags.toml`` - colour schemes, ``scheme-name = [[r, g, b], ...]``.

Default tables are loaded on first use and cached for the rest of the
process. Passing an explicit ``path`` always reads that file afresh and
never touches the cache.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml

from iconworks.errors import (
    CatalogLoadError,
    IconworksError,
    UnknownColorScheme,
    UnknownIcon,
)

from .colors import RgbColor
from .transcoder import RawArtDefinition, RenderableArt, transcode

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_ICONS_PATH = DATA_DIR / "icons.yaml"
DEFAULT_FLAGS_PATH = DATA_DIR / "flags.toml"

_ICON_CACHE: Tuple[RenderableArt, ...] | None = None
_SCHEME_CACHE: Dict[str, Tuple[RgbColor, ...]] | None = None

__all__ = [
    "DEFAULT_FLAGS_PATH",
    "DEFAULT_ICONS_PATH",
    "get_colorscheme",
    "get_icon",
    "load_colorschemes",
    "load_icons",
]


def _read_icons(path: Path) -> Tuple[RenderableArt, ...]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            records = yaml.safe_load(handle)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise CatalogLoadError(f"Could not read icons file {path}: {exc}") from exc

    if records is None:
        records = []
    if not isinstance(records, list):
        raise CatalogLoadError(f"Icons file {path} must contain a list of records")

    icons = []
    for position, record in enumerate(records):
        try:
            icons.append(transcode(RawArtDefinition.from_mapping(record)))
        except IconworksError as exc:
            raise CatalogLoadError(
                f"Could not parse icon #{position} in {path}: {exc}"
            ) from exc

    logger.info("Loaded %d icons from %s", len(icons), path)
    return tuple(icons)


def load_icons(path: Optional[Path] = None) -> Tuple[RenderableArt, ...]:
    """Return every icon in the catalog, transcoded.

    A single bad record fails the whole load with
    :class:`~iconworks.errors.CatalogLoadError`.
    """
    global _ICON_CACHE

    if path is not None:
        return _read_icons(Path(path).expanduser())
    if _ICON_CACHE is None:
        _ICON_CACHE = _read_icons(DEFAULT_ICONS_PATH)
    return _ICON_CACHE


def get_icon(icon_name: str, *, path: Optional[Path] = None) -> RenderableArt:
    """Find the first icon listing *icon_name* among its aliases (any case)."""
    wanted = str(icon_name).lower()
    for icon in load_icons(path):
        if icon.matches(wanted):
            return icon
    raise UnknownIcon(wanted)


def _read_colorschemes(path: Path) -> Dict[str, Tuple[RgbColor, ...]]:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise CatalogLoadError(f"Could not read colour schemes file {path}: {exc}") from exc

    schemes: Dict[str, Tuple[RgbColor, ...]] = {}
    for name, triples in data.items():
        if not isinstance(triples, list):
            raise CatalogLoadError(f"Colour scheme {name!r} in {path} must be a list of RGB triples")
        try:
            schemes[name] = tuple(_rgb_triple(triple) for triple in triples)
        except IconworksError as exc:
            raise CatalogLoadError(f"Colour scheme {name!r} in {path}: {exc}") from exc

    logger.info("Loaded %d colour schemes from %s", len(schemes), path)
    return schemes


def _rgb_triple(triple: object) -> RgbColor:
    if not isinstance(triple, list) or len(triple) != 3:
        raise CatalogLoadError(f"expected [r, g, b], got {triple!r}")
    return RgbColor(*triple)


def load_colorschemes(path: Optional[Path] = None) -> Dict[str, Tuple[RgbColor, ...]]:
    """Return a mapping of scheme name to its colours."""
    global _SCHEME_CACHE

    if path is not None:
        return _read_colorschemes(Path(path).expanduser())
    if _SCHEME_CACHE is None:
        _SCHEME_CACHE = _read_colorschemes(DEFAULT_FLAGS_PATH)
    return dict(_SCHEME_CACHE)


def get_colorscheme(scheme_name: str, *, path: Optional[Path] = None) -> Tuple[RgbColor, ...]:
    """Colours of the scheme called *scheme_name* (exact match)."""
    schemes = load_colorschemes(path)
    try:
        return schemes[str(scheme_name)]
    except KeyError:
        raise UnknownColorScheme(str(scheme_name)) from None
