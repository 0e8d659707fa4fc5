"""Logging configuration using Loguru."""

import sys
from pathlib import Path

from loguru import logger

from cwc_water.utils.config import Settings, get_project_root, settings as default_settings


def log_level(config: Settings) -> str:
    """Effective level; debug mode always logs at DEBUG."""
    return "DEBUG" if config.app.debug else config.logging.level.upper()


def log_directory(config: Settings) -> Path:
    path = Path(config.logging.directory)
    if not path.is_absolute():
        path = get_project_root() / path
    return path


def setup_logging(config: Settings = None) -> Path:
    """Replace all sinks with console, service and error-only file sinks.

    Safe to call more than once; each call starts from a clean slate.
    Returns the directory the log files are written to.
    """
    config = config or default_settings
    level = log_level(config)
    log_dir = log_directory(config)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger.remove()

    logger.add(
        sys.stderr,
        format=config.logging.format,
        level=level,
        colorize=True,
    )

    file_options = dict(
        format=config.logging.format,
        rotation=config.logging.rotation,
        retention=config.logging.retention,
        compression="zip",
    )
    logger.add(log_dir / f"{config.app.name}.log", level=level, **file_options)
    # Errors only
    logger.add(log_dir / "errors.log", level="ERROR", **file_options)

    logger.info(f"Logging {config.app.environment} at {level} into {log_dir}")
    return log_dir
