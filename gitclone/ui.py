"""Console shared by the CLI and the interactive flows."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

# soft_wrap keeps long paths on one line so they stay copy-pasteable.
console = Console(soft_wrap=True)

_STYLES = {
    "info": "blue",
    "success": "green",
    "warning": "yellow",
    "error": "red",
}


def log(message: str, kind: str = "info") -> None:
    """Print ``message`` in the colour associated with ``kind``."""

    style = _STYLES.get(kind, "blue")
    console.print(f"[{style}]{escape(message)}[/]")


def success(message: str) -> None:
    log(message, "success")


def warn(message: str) -> None:
    log(message, "warning")


def error(message: str) -> None:
    log(message, "error")
