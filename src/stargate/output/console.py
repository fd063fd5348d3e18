"""Rich Console factory and theme for stargate output.

Consoles render into a StringIO buffer so renderers return plain strings.
In non-TTY environments (tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

STARGATE_THEME = Theme(
    {
        "sg.ok": "bold green",
        "sg.error": "bold red",
        "sg.op": "bold cyan",
        "sg.key": "dim",
        "sg.id": "bold blue",
        "sg.name": "bold",
        "sg.open": "green",
        "sg.retired": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=STARGATE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "Console was not created by create_console()"
        raise TypeError(msg)
    return buffer.getvalue()
