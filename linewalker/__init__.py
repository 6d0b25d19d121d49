"""linewalker - Threaded console logger with in-place line updates"""

from .config import (
    DEFAULT_CONFIG,
    LINEWALKER_DIR,
    LoggerSettings,
    get_bool_setting,
    get_level_setting,
    get_overwrite_setting,
    get_setting,
    load_config,
    load_settings,
)
from .console import console, error_console
from .instance import configure, get_instance, log, shutdown
from .levels import LEVEL_STYLES, LogLevel, level_style, parse_level
from .logger import Logger, LoggerState
from .message_queue import MessageQueue
from .record import NULL_TEXT, LogRecord, to_text
from .render import OverwriteMode, RenderPlan, RenderState, TerminalRenderer, plan_render, resolve_mode, split_lines

__all__ = [
    # Config
    "DEFAULT_CONFIG",
    "LINEWALKER_DIR",
    "LoggerSettings",
    "get_bool_setting",
    "get_level_setting",
    "get_overwrite_setting",
    "get_setting",
    "load_config",
    "load_settings",
    # Console
    "console",
    "error_console",
    # Shared instance
    "configure",
    "get_instance",
    "log",
    "shutdown",
    # Levels
    "LEVEL_STYLES",
    "LogLevel",
    "level_style",
    "parse_level",
    # Logger
    "Logger",
    "LoggerState",
    "MessageQueue",
    # Records
    "NULL_TEXT",
    "LogRecord",
    "to_text",
    # Rendering
    "OverwriteMode",
    "RenderPlan",
    "RenderState",
    "TerminalRenderer",
    "plan_render",
    "resolve_mode",
    "split_lines",
]
