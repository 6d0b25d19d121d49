"""
The Logger handle: a message queue plus the render loop that drains it.

Any number of threads call `log()`; each call stamps the record, appends it to
the queue and returns immediately. One background thread, the render loop,
is the only code that ever touches the terminal. It pops records in queue
order, drops the ones below `min_level`, and hands the rest to the
TerminalRenderer.

Lifecycle:
    STARTING -> RUNNING -> DRAINING -> STOPPED

  - STARTING: the worker thread is being spawned.
  - RUNNING: the worker blocks on the queue and renders records as they come.
  - DRAINING: close() was called. No new records are accepted, but
    everything queued before the close is still rendered.
  - STOPPED: the worker has exited and been joined.

Shutdown policy is drain-before-exit: close() never abandons queued records.
It is idempotent and blocks until the worker is gone.

Logger is a plain class so tests and applications can build isolated
instances with their own console and settings. The process-wide convenience
accessor lives in `instance.py`.

Usage:
    with Logger() as logger:
        logger.info("Downloading...")
        for pct in range(0, 101, 10):
            logger.info(f"Downloading... {pct}%", update_previous=True)
"""

import threading
from enum import Enum
from typing import Any

from rich.console import Console

from .config import load_settings
from .console import console as default_console
from .levels import LogLevel, parse_level
from .message_queue import MessageQueue
from .record import LogRecord, to_text
from .render import OverwriteMode, TerminalRenderer


class LoggerState(Enum):
    """Lifecycle of a Logger's render loop."""

    STARTING = "starting"
    RUNNING = "running"
    DRAINING = "draining"
    STOPPED = "stopped"


class Logger:
    """Queue-backed console logger with in-place line updates."""

    def __init__(
        self,
        console: Console | None = None,
        min_level: LogLevel | int | str | None = None,
        overwrite: OverwriteMode | str | None = None,
        color: bool | None = None,
        error_console: Console | None = None,
        name: str = "linewalker",
    ):
        """Create the logger and start its render loop.

        Options left as None are read from the environment / config file
        (see `config.load_settings`).

        Args:
            console: Rich console to render to. Defaults to the shared stdout console.
            min_level: Records below this level are discarded at render time.
            overwrite: How `update_previous` records are drawn (auto, ansi or append).
            color: Colour lines by level.
            error_console: Where render failures are reported. Defaults to stderr.
            name: Used to name the worker thread.
        """
        if min_level is None or overwrite is None or color is None:
            settings = load_settings()
            min_level = settings.min_level if min_level is None else min_level
            overwrite = settings.overwrite if overwrite is None else overwrite
            color = settings.color if color is None else color

        self.name = name
        self._min_level = parse_level(min_level)
        self._queue = MessageQueue()
        self._renderer = TerminalRenderer(
            console or default_console, overwrite, color=color, error_console=error_console
        )
        self._rendered_count = 0
        self._state = LoggerState.STARTING
        self._state_lock = threading.Lock()

        # A logger that is never closed must not block interpreter exit
        self._thread = threading.Thread(target=self._run, name=f"{name}-render", daemon=True)
        self._thread.start()

    # -- producer side -----------------------------------------------------

    def log(self, message: Any, level: LogLevel | int | str = LogLevel.INFO, update_previous: bool = False) -> None:
        """Queue a message for rendering and return immediately.

        Args:
            message: A string, a sequence of lines, or any object (rendered via str()).
            level: Severity, used for colouring and the min_level filter.
            update_previous: Replace the previously rendered record on screen.

        Messages logged after close() are discarded.
        """
        record = LogRecord(to_text(message), parse_level(level), bool(update_previous))
        self._queue.enqueue(record)

    def trace(self, message: Any, update_previous: bool = False) -> None:
        self.log(message, LogLevel.TRACE, update_previous)

    def debug(self, message: Any, update_previous: bool = False) -> None:
        self.log(message, LogLevel.DEBUG, update_previous)

    def info(self, message: Any, update_previous: bool = False) -> None:
        self.log(message, LogLevel.INFO, update_previous)

    def warning(self, message: Any, update_previous: bool = False) -> None:
        self.log(message, LogLevel.WARNING, update_previous)

    def error(self, message: Any, update_previous: bool = False) -> None:
        self.log(message, LogLevel.ERROR, update_previous)

    def critical(self, message: Any, update_previous: bool = False) -> None:
        self.log(message, LogLevel.CRITICAL, update_previous)

    # -- properties --------------------------------------------------------

    @property
    def min_level(self) -> LogLevel:
        return self._min_level

    @min_level.setter
    def min_level(self, value: LogLevel | int | str) -> None:
        self._min_level = parse_level(value)

    @property
    def queue_count(self) -> int:
        """Records still waiting to be rendered (advisory, may be stale immediately)."""
        return self._queue.count

    @property
    def rendered_count(self) -> int:
        """Records actually written to the terminal so far."""
        return self._rendered_count

    @property
    def overwrite_mode(self) -> OverwriteMode:
        """The concrete overwrite strategy in use (never AUTO)."""
        return self._renderer.mode

    @property
    def state(self) -> LoggerState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._queue.closed

    # -- render loop -------------------------------------------------------

    def _run(self) -> None:
        self._transition(LoggerState.STARTING, LoggerState.RUNNING)
        while True:
            record = self._queue.dequeue()
            try:
                if record is None:
                    break
                self._render(record)
            finally:
                self._queue.task_done()
        self._state = LoggerState.STOPPED

    def _render(self, record: LogRecord) -> None:
        if record.level < self._min_level:
            return
        if self._renderer.render(record):
            self._rendered_count += 1

    def _transition(self, expected: LoggerState, new: LoggerState) -> None:
        with self._state_lock:
            if self._state is expected:
                self._state = new

    # -- lifecycle ---------------------------------------------------------

    def flush(self) -> None:
        """Block until every record logged so far has been rendered (or filtered)."""
        if threading.current_thread() is self._thread:
            return
        self._queue.join()

    def close(self, timeout: float | None = None) -> None:
        """Stop accepting records, render what's queued, and join the worker.

        Safe to call more than once. With a timeout, the worker may still be
        draining when this returns; `state` tells which.
        """
        with self._state_lock:
            if self._state is not LoggerState.STOPPED and not self._queue.closed:
                self._state = LoggerState.DRAINING
            self._queue.close()
        if threading.current_thread() is not self._thread:
            self._thread.join(timeout)

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<Logger {self.name!r} state={self._state.value} pending={self.queue_count}>"
