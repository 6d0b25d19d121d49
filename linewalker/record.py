import os
from dataclasses import dataclass
from typing import Any

from .levels import LogLevel

NULL_TEXT = "NULL"


@dataclass(frozen=True)
class LogRecord:
    """One unit of output waiting to be rendered.

    Records are immutable once built; the render loop produces padded copies
    of the lines instead of rewriting `text`.
    """

    text: str
    level: LogLevel = LogLevel.INFO
    update_previous: bool = False
    sequence: int = -1  # Stamped by MessageQueue.enqueue


def _scalar_text(value: Any) -> str:
    if value is None:
        return NULL_TEXT
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception:
        # Objects with a broken __str__ still get logged as something
        return NULL_TEXT


def to_text(message: Any) -> str:
    """Convert a log message to the text that will be rendered.

    Accepts a string, a list or tuple of lines (joined with the platform line
    separator) or any other object (through str(), "NULL" for None).
    """
    if isinstance(message, str):
        return message
    if isinstance(message, (list, tuple)):
        return os.linesep.join(_scalar_text(line) for line in message)
    return _scalar_text(message)
