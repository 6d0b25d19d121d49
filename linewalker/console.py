"""
Shared Rich Console instances for terminal output.

Every record the logger renders goes through one rich Console. Sharing a
single instance matters here even more than usual: the in-place update
protocol moves the cursor relative to whatever was written last, so two
Console objects writing to the same terminal would corrupt each other's
geometry.

Two consoles are exposed:
  - `console`: the default sink for rendered records (stdout).
  - `error_console`: stderr, used only for diagnostics about the logger
    itself (a failed render, a bad config value). Keeping it separate means a
    broken stdout doesn't also swallow the report about it.

Usage:
    from .console import console
    console.print("[green]Ready[/green]")
"""

from rich.console import Console

# Default output for rendered records.
console = Console()

# Fallback channel for diagnostics about rendering and configuration.
error_console = Console(stderr=True)
