"""Runtime configuration for the dbc-import command line tool.

Resolves the console log level (``--log-level`` flag, then the
``DBC_IMPORT_LOG_LEVEL`` environment variable, then WARNING) and installs
coloredlogs on the root logger.
"""

from __future__ import annotations

import logging
import os

import coloredlogs

module_logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "DBC_IMPORT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def resolve_log_level(level: str | None = None) -> int:
    """Turn a level name into a logging constant.

    Falls back to the environment variable, then to WARNING.  Unknown
    names log a warning and use the default.
    """
    level_str = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()

    level_int = getattr(logging, level_str, None)
    if not isinstance(level_int, int):
        module_logger.warning("Invalid log level %r. Defaulting to %s.",
                              level_str, DEFAULT_LOG_LEVEL)
        level_int = getattr(logging, DEFAULT_LOG_LEVEL)
    return level_int


def configure_logger(level: str | None = None) -> logging.Logger:
    """Install coloredlogs console output on the root logger."""
    root_logger = logging.getLogger()
    level_int = resolve_log_level(level)

    coloredlogs.install(
        level=level_int,
        fmt=_LOG_FORMAT,
        logger=root_logger,
        reconfigure=True,
    )
    return root_logger
