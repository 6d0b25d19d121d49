"""
Shared fixtures for the linewalker tests.

Rendering is checked two ways:
  - the raw text a rich Console wrote into an io.StringIO
  - the screen a VirtualTerminal reconstructs from that text

VirtualTerminal understands exactly the codes the renderer emits: newline,
carriage return, cursor up/down (CSI n A / CSI n B), move to column
(CSI n G), erase in line (CSI n K), and it ignores colour (CSI ... m).
That's enough to assert what a user would actually see after an in-place
update, including lines that should have been blanked.
"""

import io
import re

import pytest
from rich.console import Console

_TOKEN = re.compile(r"\x1b\[([\d;]*)([A-Za-z])|\n|\r|[^\x1b\n\r]+")


class VirtualTerminal:
    """Tiny screen model fed with a terminal byte stream."""

    def __init__(self, text: str = ""):
        self.rows: list[list[str]] = [[]]
        self.row = 0
        self.col = 0
        self.feed(text)

    def feed(self, text: str) -> None:
        for match in _TOKEN.finditer(text):
            token = match.group(0)
            command = match.group(2)
            if command:
                self._escape(command, match.group(1))
            elif token == "\n":
                self.row += 1
                self.col = 0
            elif token == "\r":
                self.col = 0
            else:
                self._write(token)

    def _escape(self, command: str, params: str) -> None:
        n = int(params) if params.isdigit() else None
        if command == "A":
            self.row = max(self.row - (n or 1), 0)
        elif command == "B":
            self.row += n or 1
        elif command == "G":
            self.col = (n or 1) - 1
        elif command == "K":
            line = self._line()
            if n == 2:
                line.clear()
            elif not n:
                del line[self.col :]

    def _line(self) -> list[str]:
        while len(self.rows) <= self.row:
            self.rows.append([])
        return self.rows[self.row]

    def _write(self, chars: str) -> None:
        line = self._line()
        for ch in chars:
            if self.col < len(line):
                line[self.col] = ch
            else:
                line.extend(" " * (self.col - len(line)))
                line.append(ch)
            self.col += 1

    @property
    def lines(self) -> list[str]:
        """Visible lines, trailing spaces stripped, trailing empty rows dropped."""
        lines = ["".join(row).rstrip() for row in self.rows]
        while lines and not lines[-1]:
            lines.pop()
        return lines


def make_console(terminal: bool = True, color_system: str | None = None, file=None) -> Console:
    """A rich Console writing to a StringIO (or the given file)."""
    return Console(
        file=file if file is not None else io.StringIO(),
        force_terminal=terminal,
        color_system=color_system,
        width=120,
        legacy_windows=False,
    )


def screen_of(console: Console) -> VirtualTerminal:
    return VirtualTerminal(console.file.getvalue())


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep the user's environment and config file out of the tests."""
    for key in ("LINEWALKER_MIN_LEVEL", "LINEWALKER_OVERWRITE", "LINEWALKER_COLOR", "NO_COLOR", "FORCE_COLOR"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("TERM", "xterm-256color")
    monkeypatch.setenv("LINEWALKER_CONFIG_FILE", str(tmp_path / "config.json"))


@pytest.fixture
def terminal_console():
    return make_console()


@pytest.fixture
def error_console():
    return make_console(terminal=False)
