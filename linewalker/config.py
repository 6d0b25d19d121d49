import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .console import error_console
from .levels import LogLevel, parse_level
from .render import OverwriteMode

# Load environment variables from .env file
load_dotenv()

# Configuration Defaults
DEFAULT_CONFIG = {
    "LINEWALKER_MIN_LEVEL": "TRACE",
    "LINEWALKER_OVERWRITE": "auto",
    "LINEWALKER_COLOR": "true",
}

# File Paths
LINEWALKER_DIR = Path(os.getenv("LINEWALKER_DIR", str(Path.home() / ".linewalker")))


def config_file() -> Path:
    """Path of the JSON config file (LINEWALKER_CONFIG_FILE overrides the default)"""
    return Path(os.getenv("LINEWALKER_CONFIG_FILE", str(LINEWALKER_DIR / "config.json")))


def load_config() -> dict[str, Any]:
    """Load configuration from file"""
    path = config_file()
    if path.exists():
        try:
            with open(path) as f:
                config = json.load(f)
            if isinstance(config, dict):
                return config
            error_console.print(f"[yellow]Warning: Ignoring config file {path}: not a JSON object[/yellow]")
        except Exception as e:
            error_console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")
    return {}


def get_setting(key: str, default: str) -> str:
    """Get setting with priority: Env Var > Config File > Default"""
    # 1. Environment Variable
    env_val = os.getenv(key)
    if env_val:
        return env_val

    # 2. Config File
    config = load_config()
    if key in config:
        return str(config[key])

    # 3. Default
    return default


def get_bool_setting(key: str, default: bool) -> bool:
    """Get boolean setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, str(default).lower())
    return value.lower() in ("true", "1", "yes", "on")


def get_level_setting(key: str, default: LogLevel) -> LogLevel:
    """Get log level setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, default.name)
    try:
        return parse_level(value)
    except ValueError:
        error_console.print(
            f"[yellow]Warning: Invalid log level for {key}: {value}, using default {default.name}[/yellow]"
        )
        return default


def get_overwrite_setting(key: str, default: OverwriteMode) -> OverwriteMode:
    """Get overwrite mode setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, default.value)
    try:
        return OverwriteMode(value.strip().lower())
    except ValueError:
        choices = ", ".join(mode.value for mode in OverwriteMode)
        error_console.print(
            f"[yellow]Warning: Invalid overwrite mode for {key}: {value} (expected one of {choices}), "
            f"using default {default.value}[/yellow]"
        )
        return default


@dataclass(frozen=True)
class LoggerSettings:
    """Resolved configuration for a Logger."""

    min_level: LogLevel = LogLevel.TRACE
    overwrite: OverwriteMode = OverwriteMode.AUTO
    color: bool = True


def load_settings() -> LoggerSettings:
    """Read every logger setting from the environment, config file and defaults."""
    return LoggerSettings(
        min_level=get_level_setting("LINEWALKER_MIN_LEVEL", parse_level(DEFAULT_CONFIG["LINEWALKER_MIN_LEVEL"])),
        overwrite=get_overwrite_setting("LINEWALKER_OVERWRITE", OverwriteMode(DEFAULT_CONFIG["LINEWALKER_OVERWRITE"])),
        color=get_bool_setting("LINEWALKER_COLOR", DEFAULT_CONFIG["LINEWALKER_COLOR"] == "true"),
    )
