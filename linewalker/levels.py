"""
Severity levels and their terminal colours.

Levels are ordered so that filtering is a plain comparison:
TRACE < DEBUG < INFO < WARNING < ERROR < CRITICAL.

Colours are rich style names for the foreground only. INFO has no style at
all, so it keeps whatever foreground colour the terminal already uses.
"""

from enum import IntEnum


class LogLevel(IntEnum):
    """Ordered severity of a log record."""

    TRACE = 0  # Extremely detailed diagnostics
    DEBUG = 1  # Information useful while debugging
    INFO = 2  # General operational messages
    WARNING = 3  # Non-critical issues that may need attention
    ERROR = 4  # A specific operation failed
    CRITICAL = 5  # Unrecoverable state


# Foreground style per level. None means "leave the terminal colour alone".
LEVEL_STYLES: dict[LogLevel, str | None] = {
    LogLevel.TRACE: "white",
    LogLevel.DEBUG: "bright_black",
    LogLevel.INFO: None,
    LogLevel.WARNING: "bright_yellow",
    LogLevel.ERROR: "bright_red",
    LogLevel.CRITICAL: "red",
}

_ALIASES = {"WARN": LogLevel.WARNING, "FATAL": LogLevel.CRITICAL}


def parse_level(value: LogLevel | int | str) -> LogLevel:
    """Convert a level, its integer value or its (case-insensitive) name to a LogLevel.

    Raises:
        ValueError: If the value doesn't name a known level.
    """
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, int):
        return LogLevel(value)
    name = str(value).strip().upper()
    if name in _ALIASES:
        return _ALIASES[name]
    if name.isdigit():
        return LogLevel(int(name))
    try:
        return LogLevel[name]
    except KeyError:
        raise ValueError(f"Unknown log level: {value!r}") from None


def level_style(level: LogLevel) -> str | None:
    """Return the rich foreground style for a level (None for the default colour)."""
    return LEVEL_STYLES.get(level)
