"""Line rendering for select_dialog.

The renderer keeps the illusion of an in-place menu on a plain line-oriented
stream: every change erases the previously painted block and paints all
lines again. Terminal control goes through the small Terminal protocol so
the renderer can be exercised without a real terminal.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType
from rich.text import Text

from .line import Line

# Extra blank cells written past each erased row
ERASE_MARGIN = 1


class Terminal(Protocol):
    """Minimal line-oriented terminal output."""

    def write_line(self, text: Text | str) -> None: ...

    def move_cursor_up(self, n: int) -> None: ...

    def clear_line(self) -> None: ...


class ConsoleTerminal:
    """Terminal backed by a Rich Console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def write_line(self, text: Text | str) -> None:
        if isinstance(text, str):
            text = Text(text)
        self.console.print(text, highlight=False, soft_wrap=True)

    def move_cursor_up(self, n: int) -> None:
        if n > 0:
            self.console.control(Control.move(0, -n))

    def clear_line(self) -> None:
        self.console.control(Control((ControlType.ERASE_IN_LINE, 2)))


class LineRenderer:
    """Paints lines to a Terminal and erases them again on repaint."""

    def __init__(self, terminal: Terminal):
        self.terminal = terminal
        self._painted_widths: list[int] = []

    @property
    def painted_rows(self) -> int:
        """Number of rows written by the last paint."""
        return len(self._painted_widths)

    def paint(self, lines: Sequence[Line]) -> None:
        """Write one row per line, top to bottom."""
        widths = []
        for line in lines:
            rendered = line.render()
            self.terminal.write_line(rendered)
            widths.append(rendered.cell_len)
        self._painted_widths = widths

    def erase(self) -> None:
        """Blank out the previously painted block and return to its top."""
        rows = self.painted_rows
        if not rows:
            return
        self.terminal.move_cursor_up(rows)
        for width in self._painted_widths:
            self.terminal.clear_line()
            self.terminal.write_line(" " * (width + ERASE_MARGIN))
        self.terminal.move_cursor_up(rows)
        self._painted_widths = []

    def repaint(self, lines: Sequence[Line]) -> None:
        self.erase()
        self.paint(lines)
