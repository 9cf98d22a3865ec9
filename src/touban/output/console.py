"""Rich Console factory and theme for touban output.

Consoles render to a StringIO buffer so renderers keep a plain
``-> str`` contract. In non-TTY environments (tests, pipes) Rich
disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TOUBAN_THEME = Theme(
    {
        "touban.ok": "bold green",
        "touban.error": "bold red",
        "touban.warning": "bold yellow",
        "touban.op": "bold cyan",
        "touban.key": "dim",
        "touban.token": "bold magenta",
        "touban.name": "bold",
        "touban.count": "cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width. Tokens are printed with
            ``soft_wrap`` so they stay on one line regardless.
    """
    return Console(
        file=StringIO(),
        theme=TOUBAN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
