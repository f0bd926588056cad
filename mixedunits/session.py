"""Interactive converter session for Mixed Units.

A session owns one input buffer and the results currently on display.
Submitting a buffer converts it from scratch; a failed conversion reports
its error and leaves the displayed results untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from mixedunits.config import DEFAULT_INPUT, HISTORY_SIZE
from mixedunits.exceptions import MixedUnitsError
from mixedunits.models.entries import NormalizedEntry
from mixedunits.normalization.normalizer import MoneyNormalizer

logger = logging.getLogger(__name__)

HELP_TEXT = """Paste a JSON object and finish it with an empty line.

Commands:
  :run       convert the current buffer again
  :show      print the current buffer
  :example   load the example buffer
  :undo      restore the previous buffer
  :redo      re-apply an undone buffer
  :help      show this help
  :quit      leave the session"""


@dataclass
class ProcessOutcome:
    """Result of one conversion attempt.

    On failure ``results`` holds the previous, still displayed results.
    """

    ok: bool
    results: list[NormalizedEntry] = field(default_factory=list)
    error: str | None = None


class InputHistory:
    """Bounded undo/redo history of input buffers."""

    def __init__(self, max_size: int = HISTORY_SIZE) -> None:
        if max_size < 1:
            raise ValueError(f"History size must be at least 1, got {max_size}")
        self.max_size = max_size
        self._states: list[str] = []
        self._cursor = -1

    def __len__(self) -> int:
        return len(self._states)

    @property
    def current(self) -> str | None:
        if self._cursor < 0:
            return None
        return self._states[self._cursor]

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._states) - 1

    def push(self, state: str) -> None:
        """Record a new buffer. Discards any states ahead of the cursor."""
        if state == self.current:
            return
        del self._states[self._cursor + 1 :]
        self._states.append(state)
        if len(self._states) > self.max_size:
            del self._states[0]
        self._cursor = len(self._states) - 1

    def undo(self) -> str | None:
        if not self.can_undo:
            return None
        self._cursor -= 1
        return self._states[self._cursor]

    def redo(self) -> str | None:
        if not self.can_redo:
            return None
        self._cursor += 1
        return self._states[self._cursor]


class ConverterSession:
    """Input buffer plus the results produced from it."""

    def __init__(
        self,
        user_input: str = DEFAULT_INPUT,
        normalizer: MoneyNormalizer | None = None,
        history_size: int = HISTORY_SIZE,
    ) -> None:
        self.normalizer = normalizer or MoneyNormalizer()
        self.history = InputHistory(history_size)
        self.user_input = user_input
        self.results: list[NormalizedEntry] = []
        self.history.push(user_input)

    def set_input(self, text: str) -> None:
        self.user_input = text
        self.history.push(text)

    def process(self) -> ProcessOutcome:
        """Convert the current buffer, replacing results only on success."""
        try:
            results = self.normalizer.convert(self.user_input)
        except MixedUnitsError as exc:
            logger.debug("Conversion failed, keeping %d previous results: %s", len(self.results), exc)
            return ProcessOutcome(ok=False, results=self.results, error=str(exc))

        self.results = results
        return ProcessOutcome(ok=True, results=results)

    def undo(self) -> bool:
        """Restore the previous buffer. Returns False if there is none."""
        state = self.history.undo()
        if state is None:
            return False
        self.user_input = state
        return True

    def redo(self) -> bool:
        state = self.history.redo()
        if state is None:
            return False
        self.user_input = state
        return True

    def reset(self) -> None:
        """Load the example buffer and clear the displayed results."""
        self.set_input(DEFAULT_INPUT)
        self.results = []


# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------


def build_results_table(entries: list[NormalizedEntry], title: str = "Results") -> Table:
    """Build a Rich table with one row per normalized entry."""
    tbl = Table(title=title)
    tbl.add_column("Key", style="bold")
    tbl.add_column("Detected", style="dim")
    tbl.add_column("Formatted", justify="right", style="green")
    tbl.add_column("Units", justify="right", style="blue")
    for entry in entries:
        tbl.add_row(escape(entry.key), entry.detected, entry.formatted, f"{entry.units} units")
    return tbl


def _read_buffer(console: Console, first_line: str) -> str:
    """Collect lines until an empty line or end of input."""
    lines = [first_line]
    while True:
        try:
            line = console.input()
        except EOFError:
            break
        if not line.strip():
            break
        lines.append(line)
    return "\n".join(lines)


def _process_and_show(session: ConverterSession, console: Console) -> None:
    outcome = session.process()
    if not outcome.ok:
        console.print(f"[red]{escape(outcome.error or '')}[/red]")
        if outcome.results:
            console.print(build_results_table(outcome.results, title="Results (unchanged)"))
        return
    if not outcome.results:
        console.print("[dim]No entries.[/dim]")
        return
    console.print(build_results_table(outcome.results))


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def run_session(session: ConverterSession | None = None, console: Console | None = None) -> None:
    """Interactive loop — called from cli.py."""
    if session is None:
        session = ConverterSession()
    if console is None:
        console = Console()

    console.print(Panel(HELP_TEXT, title="[bold cyan]Mixed Units[/bold cyan]", border_style="cyan"))

    while True:
        try:
            line = console.input("[bold cyan]>[/bold cyan] ")
        except EOFError:
            break

        command = line.strip()
        if not command:
            continue
        if command in (":quit", ":q"):
            break
        if command == ":help":
            console.print(HELP_TEXT, markup=False)
            continue
        if command == ":show":
            console.print(session.user_input, markup=False)
            continue

        if command == ":run":
            pass
        elif command == ":example":
            session.reset()
        elif command in (":undo", ":redo"):
            moved = session.undo() if command == ":undo" else session.redo()
            if not moved:
                console.print(f"[dim]Nothing to {command[1:]}.[/dim]")
            else:
                console.print(session.user_input, markup=False)
            continue
        elif command.startswith(":"):
            console.print(f"[red]Unknown command: {escape(command)}[/red]")
            continue
        else:
            session.set_input(_read_buffer(console, line))

        _process_and_show(session, console)

    console.print("[dim]Bye.[/dim]")
