"""Interactive prompt capability and its terminal implementation."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Protocol, Sequence

import readchar
from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table

from gitclone.errors import InputClosed

# Returns an error message to re-present, or None when the answer is acceptable.
Validator = Callable[[str], Optional[str]]


@contextmanager
def _answer_required():
    try:
        yield
    except EOFError as exc:
        raise InputClosed("Input closed before an answer was given.") from exc


@dataclass(frozen=True, slots=True)
class Choice:
    value: str
    label: str


class Prompter(Protocol):
    """Minimal prompting surface the flows depend on."""

    def ask_text(self, message: str, *, default: Optional[str] = None, validate: Optional[Validator] = None) -> str: ...

    def ask_confirm(self, message: str, *, default: bool = False) -> bool: ...

    def ask_select(self, message: str, choices: Sequence[Choice]) -> str: ...

    def ask_keypress(self, message: str, keys: Mapping[str, str]) -> str: ...


class TerminalPrompter:
    """Prompter backed by rich prompts and readchar keypresses.

    Arrow-key selection and single keypresses need a TTY; when stdin is not
    interactive both fall back to line-based input.
    """

    def __init__(self, console: Console) -> None:
        self.console = console

    def _interactive(self) -> bool:
        return sys.stdin.isatty()

    def ask_text(self, message: str, *, default: Optional[str] = None, validate: Optional[Validator] = None) -> str:
        while True:
            with _answer_required():
                if default is not None:
                    answer = Prompt.ask(escape(message), console=self.console, default=default)
                else:
                    answer = Prompt.ask(escape(message), console=self.console)
            answer = (answer or "").strip()
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self.console.print(f"[red]>> {escape(error)}[/]")

    def ask_confirm(self, message: str, *, default: bool = False) -> bool:
        with _answer_required():
            return Confirm.ask(escape(message), console=self.console, default=default)

    def ask_select(self, message: str, choices: Sequence[Choice]) -> str:
        if not choices:
            raise ValueError("ask_select needs at least one choice")
        if not self._interactive():
            return self._select_by_number(message, choices)
        return self._select_with_arrows(message, choices)

    def _select_by_number(self, message: str, choices: Sequence[Choice]) -> str:
        self.console.print(f"[bold]{escape(message)}[/]")
        for index, choice in enumerate(choices, 1):
            self.console.print(f"  {index}) {escape(choice.label)}")
        numbers = [str(index) for index in range(1, len(choices) + 1)]
        with _answer_required():
            picked = Prompt.ask("Enter number", console=self.console, choices=numbers, show_choices=False)
        return choices[int(picked) - 1].value

    def _select_with_arrows(self, message: str, choices: Sequence[Choice]) -> str:
        selected = 0

        def render() -> Panel:
            table = Table.grid(padding=(0, 2))
            table.add_column(style="cyan", justify="left", width=2)
            table.add_column(justify="left")
            for index, choice in enumerate(choices):
                marker = "▶" if index == selected else " "
                label = f"[cyan]{escape(choice.label)}[/]" if index == selected else escape(choice.label)
                table.add_row(marker, label)
            table.add_row("", "")
            table.add_row("", "[dim]Use ↑/↓ to navigate, Enter to select[/dim]")
            return Panel(table, title=f"[bold]{escape(message)}[/bold]", border_style="cyan", padding=(0, 1))

        with Live(render(), console=self.console, transient=True, auto_refresh=False) as live:
            while True:
                key = readchar.readkey()
                if key == readchar.key.CTRL_C:
                    raise KeyboardInterrupt
                if key in (readchar.key.UP, readchar.key.CTRL_P):
                    selected = (selected - 1) % len(choices)
                elif key in (readchar.key.DOWN, readchar.key.CTRL_N):
                    selected = (selected + 1) % len(choices)
                elif key in (readchar.key.ENTER, "\n"):
                    break
                live.update(render(), refresh=True)

        picked = choices[selected]
        self.console.print(f"[bold]{escape(message)}[/] [cyan]{escape(picked.label)}[/]")
        return picked.value

    def ask_keypress(self, message: str, keys: Mapping[str, str]) -> str:
        """Wait for one of ``keys`` and return its mapped value.

        Other keys are ignored; Ctrl-C raises ``KeyboardInterrupt``.
        """

        if not self._interactive():
            return self._keypress_by_line(message, keys)
        self.console.print(escape(message), end="")
        while True:
            key = readchar.readkey()
            if key == readchar.key.CTRL_C:
                self.console.print()
                raise KeyboardInterrupt
            if key in keys:
                self.console.print()
                return keys[key]

    def _keypress_by_line(self, message: str, keys: Mapping[str, str]) -> str:
        while True:
            with _answer_required():
                line = self.console.input(escape(message))
            key = line[:1] if line else readchar.key.ENTER
            if key in keys:
                return keys[key]
