"""
Package logger for fpstd.

Importing fpstd only attaches a NullHandler to the ``fpstd`` logger; records
propagate to whatever the host application configured. Call `setup_logger`
to opt in to console output when running fpstd on its own (scripts, examples).

The level comes from the FPSTD_LOG_LEVEL environment variable. Unknown or
empty values fall back to WARNING.
"""

import logging
import os
import sys

__all__ = ["logger", "resolve_level", "setup_logger"]

DEFAULT_LEVEL = logging.WARNING
LEVEL_ENV_VAR = "FPSTD_LOG_LEVEL"


def resolve_level(level: str | int | None = None) -> int:
    """
    Turn a level name (or number) into a logging level.

    Args:
        level: Level name such as "debug" or "INFO", a numeric level, or None
            to read FPSTD_LOG_LEVEL.

    Returns:
        The numeric level, or WARNING when the name is not a known level.
    """
    if level is None:
        level = os.getenv(LEVEL_ENV_VAR, "")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else DEFAULT_LEVEL


def setup_logger(
    name: str = "fpstd",
    level: str | int | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Attach a stdout handler to an fpstd logger.

    Args:
        name: Logger name (the package or one of its modules)
        level: Log level; see `resolve_level`
        format_string: Custom format string

    Returns:
        The configured logger. Calling again for the same name adds no
        second stream handler.
    """
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    log = logging.getLogger(name)
    log.setLevel(resolve_level(level))

    if not any(isinstance(h, logging.StreamHandler) for h in log.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        log.addHandler(handler)

    return log


logger = logging.getLogger("fpstd")
logger.addHandler(logging.NullHandler())
logger.setLevel(resolve_level())
