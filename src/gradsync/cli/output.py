"""
Output - Console output formatting.

Provides pretty-printed output with colors and formatting, and a
presenter that renders sync controller output to the console.
"""

import sys
from typing import Optional, Sequence, TextIO

from ..core.domain.entities import GraduateRecord
from ..core.ports.presenter import NotificationKind, PresenterPort


class Colors:
    """ANSI color codes."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"


class Symbols:
    """Unicode symbols for output."""

    CHECK = "✓"
    CROSS = "✗"
    ARROW = "→"
    WARN = "⚠"
    INFO = "ℹ"
    LOCK = "🔒"

    BOX_H = "─"


class Console:
    """
    Console output helper with colors and formatting.

    Colors are only emitted when the stream is a terminal.
    """

    def __init__(self, color: bool = True, verbose: bool = False, stream: Optional[TextIO] = None):
        self._stream = stream
        self.color = color and self.stream.isatty()
        self.verbose = verbose

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def _c(self, text: str, *codes: str) -> str:
        """Apply color codes to text."""
        if not self.color:
            return text
        return "".join(codes) + text + Colors.RESET

    def _status(self, symbol: str, text: str, color: str) -> None:
        self.print(self._c(f"  {symbol} {text}", color))

    def print(self, text: str = "") -> None:
        """Print text."""
        self.stream.write(text + "\n")

    def header(self, text: str) -> None:
        """Print a title between two rules."""
        rule = Symbols.BOX_H * max(len(text) + 4, 50)
        self.print()
        self.print(self._c(rule, Colors.CYAN))
        self.print(self._c(f"  {text}", Colors.BOLD, Colors.CYAN))
        self.print(self._c(rule, Colors.CYAN))
        self.print()

    def section(self, text: str) -> None:
        self.print()
        self.print(self._c(f"{Symbols.ARROW} {text}", Colors.BOLD, Colors.BLUE))

    def success(self, text: str) -> None:
        self._status(Symbols.CHECK, text, Colors.GREEN)

    def error(self, text: str) -> None:
        self._status(Symbols.CROSS, text, Colors.RED)

    def warning(self, text: str) -> None:
        self._status(Symbols.WARN, text, Colors.YELLOW)

    def info(self, text: str) -> None:
        self._status(Symbols.INFO, text, Colors.CYAN)

    def detail(self, text: str) -> None:
        """Print detail text (dimmed)."""
        self.print(self._c(f"    {text}", Colors.DIM))

    def debug(self, text: str) -> None:
        """Print debug message (only in verbose mode)."""
        if self.verbose:
            self.print(self._c(f"  [DEBUG] {text}", Colors.DIM))

    def table(self, headers: list[str], rows: list[list[str]]) -> None:
        """Print left-aligned columns sized to their widest cell."""
        cells = [[str(cell) for cell in row] for row in rows]
        widths = [
            max([len(header)] + [len(row[i]) for row in cells if i < len(row)])
            for i, header in enumerate(headers)
        ]

        def line(values: list[str], bold: bool = False) -> str:
            padded = [v.ljust(w) for v, w in zip(values, widths)]
            if bold:
                padded = [self._c(p, Colors.BOLD) for p in padded]
            return "  " + "  ".join(padded)

        self.print(line(headers, bold=True))
        self.print(line(["-" * w for w in widths]))
        for row in cells:
            self.print(line(row))

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question; anything but y/yes is a no."""
        prompt = self._c(f"\n{Symbols.WARN} {message} (y/N): ", Colors.YELLOW)
        try:
            answer = input(prompt)
        except (EOFError, KeyboardInterrupt):
            self.print()
            return False
        return answer.strip().lower() in ("y", "yes")


class ConsolePresenter(PresenterPort):
    """
    Presenter for one-shot command line sessions.

    Args:
        console: Console to print to
        show_records: Print the records table (False prints only the count)
    """

    RECORD_HEADERS = ["ID", "Name", "Faculty", "Year", "Telephone"]

    def __init__(self, console: Optional[Console] = None, show_records: bool = True):
        self.console = console or Console()
        self.show_records = show_records

    def render_records(self, records: Sequence[GraduateRecord]) -> None:
        if not self.show_records:
            return
        self.console.section("Graduates")
        self.console.print()
        rows = [
            [r.id, r.name, r.faculty, str(r.graduation_year), r.telephone]
            for r in records
        ]
        self.console.table(self.RECORD_HEADERS, rows)

    def render_count(self, count: int) -> None:
        self.console.print()
        self.console.info(f"Registered graduates: {count}")

    def render_loading(self) -> None:
        self.console.debug("Loading graduates...")

    def render_empty(self) -> None:
        if self.show_records:
            self.console.info("No graduates registered yet.")

    def render_error(self, message: str, retryable: bool) -> None:
        if retryable:
            self.console.detail("Run the command again to retry.")

    def notify(self, message: str, kind: NotificationKind) -> None:
        if kind is NotificationKind.SUCCESS:
            self.console.success(message)
        elif kind is NotificationKind.ERROR:
            self.console.error(message)
        elif kind is NotificationKind.WARNING:
            self.console.warning(message)
        else:
            self.console.info(message)

    def show_gate(self) -> None:
        self.console.debug(f"{Symbols.LOCK} Unlocking graduate list")

    def hide_gate(self) -> None:
        pass

    def render_gate_error(self, message: str) -> None:
        self.console.error(message)

    def set_list_visible(self, visible: bool) -> None:
        pass
