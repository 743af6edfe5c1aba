"""Rich Console factory and theme for pieshop output.

Consoles render to a StringIO buffer so renderers keep the
``render_result() -> str`` contract. Off a TTY (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PIE_THEME = Theme(
    {
        "pie.ok": "bold green",
        "pie.error": "bold red",
        "pie.op": "bold cyan",
        "pie.key": "dim",
        "pie.id": "bold blue",
        "pie.name": "bold",
        "pie.price": "magenta",
        "pie.total": "bold magenta",
        "pie.week": "yellow",
        "pie.soldout": "dim red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=PIE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
