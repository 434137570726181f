"""Logging set-up for the iconworks command line tools."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

__all__ = ["CLI_LOG_NAME", "LOG_DIR_ENV", "configure_cli_logging", "configure_logging"]

LOG_DIR_ENV = "ICONWORKS_LOG_DIR"
CLI_LOG_NAME = "iconworks"
_MANAGED_HANDLER_FLAG = "_iconworks_managed_handler"


def _default_log_directory() -> Path:
    """Return ``$ICONWORKS_LOG_DIR`` or ``logs/`` under the project root."""

    env_override = os.environ.get(LOG_DIR_ENV)
    if env_override:
        return Path(env_override).expanduser()

    module_path = Path(__file__).resolve()
    for candidate in module_path.parents:
        if (candidate / "pyproject.toml").exists() or (candidate / ".git").exists():
            return candidate / "logs"

    # Installed outside a checkout (site-packages); log beside the caller.
    return Path.cwd() / "logs"


def _remove_managed_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _MANAGED_HANDLER_FLAG, False):
            logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_name: str,
    *,
    level: int = logging.INFO,
    log_dir: Optional[Path] = None,
    include_console: bool = True,
) -> Path:
    """Send root logging to ``<log_dir>/<log_name>.log`` and optionally stderr.

    Handlers installed by an earlier call are removed first, so repeated
    calls never duplicate output.
    """

    target_directory = (
        Path(log_dir).expanduser() if log_dir else _default_log_directory()
    )
    target_directory.mkdir(parents=True, exist_ok=True)
    log_path = target_directory / f"{log_name}.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    _remove_managed_handlers(root_logger)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    setattr(file_handler, _MANAGED_HANDLER_FLAG, True)
    root_logger.addHandler(file_handler)

    if include_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        setattr(console_handler, _MANAGED_HANDLER_FLAG, True)
        root_logger.addHandler(console_handler)

    logging.captureWarnings(True)

    return log_path


def configure_cli_logging(verbose: bool = False, *, log_dir: Optional[Path] = None) -> Path:
    """Logging for the ``iconworks`` command.

    Everything at INFO and above goes to ``iconworks.log``. ``verbose``
    lowers the level to DEBUG, which includes per-icon transcoding detail,
    and echoes records to stderr.
    """

    return configure_logging(
        CLI_LOG_NAME,
        level=logging.DEBUG if verbose else logging.INFO,
        log_dir=log_dir,
        include_console=verbose,
    )
