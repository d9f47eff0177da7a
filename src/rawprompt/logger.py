"""Loguru setup for rawprompt.

The package is disabled on import so that library users see nothing until
an application calls ``setup_logger``. No sink ever targets stderr unless
asked for: while the terminal is in raw mode such output would land in the
middle of the edited line.
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger
from platformdirs import user_state_dir

APP_NAME = "rawprompt"
LOG_FILE_NAME = "rawprompt.log"


def default_log_file() -> Path:
    """Per-user log location, e.g. ``~/.local/state/rawprompt/rawprompt.log``."""
    return Path(user_state_dir(APP_NAME, appauthor=False)) / LOG_FILE_NAME


def setup_logger(
    log_file: Optional[Union[str, Path]] = None,
    log_level: str = "INFO",
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = False,
) -> None:
    """
    Attach sinks and enable logging for the package.

    Args:
        log_file: File to log to; without one no file sink is added
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
        console_output: Whether to also log to stderr
    """
    logger.remove()
    logger.configure(extra={"name": APP_NAME})

    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    if log_file is not None:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(path),
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]} | {name}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            compression=compression,
            encoding="utf-8",
        )

    logger.enable(APP_NAME)


def get_logger(name: Optional[str] = None):
    """Return the shared logger bound to ``name`` (used in the log format)."""
    return logger.bind(name=name or APP_NAME)


logger.disable(APP_NAME)
