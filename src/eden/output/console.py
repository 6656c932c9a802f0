"""Rich Console factory and theme for eden output.

Consoles render into a StringIO buffer so formatting stays a pure
``ServiceResult -> str`` function. In non-TTY environments (tests,
pipes) Rich disables color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

EDEN_THEME = Theme(
    {
        "eden.ok": "bold green",
        "eden.error": "bold red",
        "eden.warning": "bold yellow",
        "eden.op": "bold cyan",
        "eden.key": "dim",
        "eden.field": "bold",
    }
)


def create_console(*, width: int | None = None) -> Console:
    return Console(file=StringIO(), theme=EDEN_THEME, highlight=False, width=width or 120)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
