"""Rich Console factory and theme for reachctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

REACH_THEME = Theme(
    {
        "reach.ok": "bold green",
        "reach.error": "bold red",
        "reach.warning": "bold yellow",
        "reach.op": "bold cyan",
        "reach.key": "dim",
        "reach.label": "bold blue",
        "reach.true": "bold green",
        "reach.false": "dim",
        "reach.diag": "bold magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=REACH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def bit_style(value: bool, *, diagonal: bool = False) -> str:
    """Return the Rich style name for a matrix cell."""
    if diagonal:
        return "reach.diag"
    return "reach.true" if value else "reach.false"
