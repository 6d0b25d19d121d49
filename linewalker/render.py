"""
Terminal rendering and the in-place update protocol.

A record flagged `update_previous` replaces the lines of the record rendered
just before it instead of appending below them. The renderer only knows two
things about that previous record, kept in `RenderState`:
  - its width (the longest line, in characters)
  - its line count

Replacing works in three moves:
  1. Move the cursor up by the previous line count, to column 0. The cursor
     now sits on the first line of the previous record.
  2. Write the new lines, each right-padded with spaces to the previous
     width so no stale characters survive past the new text's end.
  3. If the previous record had more lines, write that many blank (padded)
     lines to wipe the leftovers, then move back up over them so the cursor
     ends directly below the new content. The next replace then only needs
     the new record's own line count.

The geometry is computed by `plan_render`, a pure function. `TerminalRenderer`
renders each plan through a rich capture (styles plus `Control` codes for
cursor up and move to column) and writes the resulting text to the console
file in one write. Writing it ourselves keeps every I/O error, broken pipes
included, inside the per-record error handling.

When the output isn't an interactive terminal (a pipe, a file, a dumb
terminal) cursor movement would just leave escape garbage in the output, so
`OverwriteMode.AUTO` falls back to plain append-only rendering.
"""

from dataclasses import dataclass
from enum import Enum

from rich.console import Console
from rich.control import Control
from rich.markup import escape

from .console import error_console as default_error_console
from .levels import level_style
from .record import LogRecord


class OverwriteMode(str, Enum):
    """How `update_previous` records are put on screen."""

    AUTO = "auto"  # ANSI when writing to an interactive terminal, else APPEND
    ANSI = "ansi"  # Cursor-up + padding overwrite
    APPEND = "append"  # Never move the cursor; every record is appended


@dataclass(frozen=True)
class RenderState:
    """Geometry of the most recently rendered record."""

    width: int = 0
    line_count: int = 0


@dataclass(frozen=True)
class RenderPlan:
    """Everything needed to put one record on screen."""

    lines: tuple[str, ...]
    move_up: int  # Lines to move up (to column 0) before writing
    rewind: int  # Blank filler lines to move back over after writing
    state: RenderState  # Geometry to remember for the next record


def split_lines(text: str) -> list[str]:
    """Split text into visual lines. Empty text is still one (empty) line."""
    return text.splitlines() or [""]


def plan_render(record: LogRecord, previous: RenderState, overwrite: bool = True) -> RenderPlan:
    """Work out the lines and cursor moves for a record.

    Args:
        record: The record to render.
        previous: Geometry of the last rendered record.
        overwrite: False for append-only output; `update_previous` is ignored.

    Returns:
        The plan. `plan.state` holds the record's natural geometry (before any
        padding or filler lines) for the next call.
    """
    lines = split_lines(record.text)
    state = RenderState(width=max(len(line) for line in lines), line_count=len(lines))

    if not (overwrite and record.update_previous and previous.line_count > 0):
        return RenderPlan(lines=tuple(lines), move_up=0, rewind=0, state=state)

    padded = [line.ljust(previous.width) for line in lines]
    filler = max(previous.line_count - len(lines), 0)
    padded.extend(" " * previous.width for _ in range(filler))
    return RenderPlan(lines=tuple(padded), move_up=previous.line_count, rewind=filler, state=state)


def resolve_mode(mode: OverwriteMode | str, console: Console) -> OverwriteMode:
    """Pick the concrete overwrite strategy for a console."""
    mode = OverwriteMode(mode)
    if mode is not OverwriteMode.AUTO:
        return mode
    if console.is_terminal and not console.is_dumb_terminal:
        return OverwriteMode.ANSI
    return OverwriteMode.APPEND


class TerminalRenderer:
    """Writes records to a rich Console and tracks the last record's geometry.

    Only the render loop calls `render`, so the state needs no locking.
    """

    def __init__(
        self,
        console: Console,
        mode: OverwriteMode | str = OverwriteMode.AUTO,
        color: bool = True,
        error_console: Console | None = None,
    ):
        self.console = console
        self.mode = resolve_mode(mode, console)
        self.color = color
        self.error_console = error_console or default_error_console
        self.state = RenderState()

    @property
    def overwrite(self) -> bool:
        return self.mode is OverwriteMode.ANSI

    def render(self, record: LogRecord) -> bool:
        """Render one record. Returns False if writing to the terminal failed.

        Failures never propagate: they're reported on the error console and
        the geometry is forgotten, since the cursor position is unknown after
        a partial write. The next record is then simply appended.
        """
        plan = plan_render(record, self.state, overwrite=self.overwrite)
        style = level_style(record.level) if self.color else None
        try:
            self._write(self._capture(plan, style))
        except Exception as e:
            # Closed streams, broken pipes and encoding errors raise different types
            self.state = RenderState()
            self._report_failure(record, e)
            return False
        self.state = plan.state
        return True

    def _capture(self, plan: RenderPlan, style: str | None) -> str:
        with self.console.capture() as capture:
            if plan.move_up:
                self.console.control(Control.move_to_column(0, y=-plan.move_up))
            for line in plan.lines:
                self.console.out(line, style=style, highlight=False)
            if plan.rewind:
                self.console.control(Control.move_to_column(0, y=-plan.rewind))
        return capture.get()

    def _write(self, text: str) -> None:
        # Written here rather than by rich, which answers a broken pipe by
        # redirecting stdout and raising SystemExit
        if self.console.quiet:
            return
        self.console.file.write(text)
        self.console.file.flush()

    def _report_failure(self, record: LogRecord, error: Exception) -> None:
        try:
            self.error_console.print(
                f"[red]linewalker: could not render record #{record.sequence}: "
                f"{escape(str(error))}[/red]",
                highlight=False,
            )
        except Exception:
            # Nowhere left to report to
            pass
