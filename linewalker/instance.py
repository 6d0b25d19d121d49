"""
Process-wide shared Logger.

Most programs want one logger for the whole process without threading a
handle through every call. This module keeps that one instance:

    from linewalker import instance
    instance.log("Starting up")
    instance.warning("Low disk space")
    instance.shutdown()

The shared Logger is created lazily on first use. `shutdown()` drains and
joins it, then clears the reference; the next call to `get_instance()` (or any
logging helper) builds a fresh instance with fresh state. Logging after
shutdown therefore works instead of failing.

`shutdown` is registered with atexit, so records still queued when the
interpreter exits get rendered.
"""

import atexit
import threading
from typing import Any

from .levels import LogLevel
from .logger import Logger

_instance: Logger | None = None
_lock = threading.Lock()


def get_instance() -> Logger:
    """Return the shared Logger, creating it on first use."""
    global _instance
    with _lock:
        if _instance is None:
            _instance = Logger()
        return _instance


def configure(**options: Any) -> Logger:
    """Replace the shared Logger with one built from the given Logger options.

    Any existing shared instance is closed (its queue is drained).
    """
    global _instance
    logger = Logger(**options)
    with _lock:
        previous, _instance = _instance, logger
    if previous is not None:
        previous.close()
    return logger


def shutdown(timeout: float | None = None) -> None:
    """Drain and stop the shared Logger. A no-op if there is none."""
    global _instance
    with _lock:
        logger, _instance = _instance, None
    if logger is not None:
        logger.close(timeout)


def log(message: Any, level: LogLevel | int | str = LogLevel.INFO, update_previous: bool = False) -> None:
    """Log through the shared Logger."""
    get_instance().log(message, level, update_previous)


def trace(message: Any, update_previous: bool = False) -> None:
    get_instance().trace(message, update_previous)


def debug(message: Any, update_previous: bool = False) -> None:
    get_instance().debug(message, update_previous)


def info(message: Any, update_previous: bool = False) -> None:
    get_instance().info(message, update_previous)


def warning(message: Any, update_previous: bool = False) -> None:
    get_instance().warning(message, update_previous)


def error(message: Any, update_previous: bool = False) -> None:
    get_instance().error(message, update_previous)


def critical(message: Any, update_previous: bool = False) -> None:
    get_instance().critical(message, update_previous)


atexit.register(shutdown)
