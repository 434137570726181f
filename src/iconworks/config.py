"""Project defaults for iconworks.

Values come from the ``[tool.iconworks]`` table of the nearest
``pyproject.toml`` and may be overridden with ``ICONWORKS__<KEY>``
environment variables, e.g. ``ICONWORKS__DEFAULT_PRECISION=2``.
Unparseable values fall back to the built-in defaults.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

_CONFIG_ENV_PREFIX = "ICONWORKS__"

__all__ = ["IconworksSettings", "load_settings"]


def _find_pyproject(start: Optional[Path] = None) -> Optional[Path]:
    """Locate the closest ``pyproject.toml`` relative to *start*."""

    current = (start or Path.cwd()).resolve()
    for candidate in [current, *current.parents]:
        pyproject = candidate / "pyproject.toml"
        if pyproject.exists():
            return pyproject
    return None


def _coerce_precision(value: object, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        precision = int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid default_precision %r", value)
        return default
    if precision < 0:
        logger.warning("Ignoring negative default_precision %r", value)
        return default
    return precision


def _as_path(value: object) -> Optional[Path]:
    if isinstance(value, Path):
        return value
    if isinstance(value, str) and value.strip():
        return Path(value.strip()).expanduser()
    return None


@dataclass(frozen=True)
class IconworksSettings:
    """Resolved defaults for the icon catalog and formatter."""

    icons_path: Optional[Path] = None
    flags_path: Optional[Path] = None
    default_precision: int = 1


def _load_pyproject_settings(start: Optional[Path]) -> Dict[str, object]:
    pyproject = _find_pyproject(start)
    if not pyproject:
        return {}

    try:
        with pyproject.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Could not read %s, using defaults: %s", pyproject, exc)
        return {}

    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        return {}
    tool_cfg = tool.get("iconworks", {})
    if not isinstance(tool_cfg, dict):
        return {}

    # Relative paths are taken relative to the pyproject that declares them.
    resolved = dict(tool_cfg)
    for key in ("icons_path", "flags_path"):
        path = _as_path(resolved.get(key))
        if path is not None and not path.is_absolute():
            resolved[key] = pyproject.parent / path
    return resolved


def _load_env_settings() -> Dict[str, object]:
    values: Dict[str, object] = {}
    for env_key, env_value in os.environ.items():
        if not env_key.startswith(_CONFIG_ENV_PREFIX):
            continue
        key = env_key[len(_CONFIG_ENV_PREFIX) :].lower()
        values[key] = env_value
    return values


def load_settings(start: Optional[Path] = None) -> IconworksSettings:
    """Load project defaults, applying environment overrides when present."""

    raw = _load_pyproject_settings(start)
    raw.update(_load_env_settings())

    return IconworksSettings(
        icons_path=_as_path(raw.get("icons_path")),
        flags_path=_as_path(raw.get("flags_path")),
        default_precision=_coerce_precision(
            raw.get("default_precision"), IconworksSettings.default_precision
        ),
    )
