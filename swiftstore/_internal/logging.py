"""
Internal logging module for swiftstore. logs are written to
"logs/internal.log" inside the swiftstore cache directory. Once enabled,
  - regular `logger.{debug,info,warning,error}` calls will be written
  to both the log file and printed to the console;
  - `swiftstore._internal.logging.log` calls will only be written to the
  log file but not printed to the console.
"""

import os

from loguru import logger

from ..config import LOGS_DIR, _to_bool

_LEVEL = "SWIFTSTORE_INTERNAL"
_LOGFILE_BASE = LOGS_DIR / "internal.log"
_HANDLER_ID = None
_enabled: bool = False

# no = 9 slightly smaller than loguru's default DEBUG level 10
logger.level(name=_LEVEL, no=9)


def disable():
    """
    Disables internal logging. enable() and disable() can be called multiple times to
    temporarily turn on and off internal logging.
    """
    global _enabled
    global _HANDLER_ID
    if _enabled:
        if _HANDLER_ID is not None:
            logger.remove(_HANDLER_ID)
            _HANDLER_ID = None
        _enabled = False


def enable():
    """
    Enables internal logging, writing to the log file under
    swiftstore.config.LOGS_DIR.

    Internal logging writes to the filesystem, so the environment variable
    SWIFTSTORE_ENABLE_INTERNAL_LOG must be set to a true value. Otherwise this
    is a no-op.
    """
    global _enabled
    global _HANDLER_ID

    if not _to_bool(os.environ.get("SWIFTSTORE_ENABLE_INTERNAL_LOG", "0")):
        return

    if not _enabled:
        _HANDLER_ID = logger.add(
            _LOGFILE_BASE,
            level=_LEVEL,
            colorize=False,
            rotation="10 MB",
            retention=3,
            compression="zip",
        )
        _enabled = True


def is_enabled() -> bool:
    return _enabled


def log(*args, **kwargs):
    if not _enabled:
        return
    return logger.opt(depth=1).log(_LEVEL, *args, **kwargs)
