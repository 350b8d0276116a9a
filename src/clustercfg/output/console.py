"""Rich Console factory and theme for clustercfg output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CLUSTER_THEME = Theme(
    {
        "cc.ok": "bold green",
        "cc.error": "bold red",
        "cc.op": "bold cyan",
        "cc.key": "dim",
        "cc.code": "magenta",
    }
)


def create_console(*, no_color: bool = False) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
    """
    return Console(
        file=StringIO(),
        theme=CLUSTER_THEME,
        no_color=no_color,
        highlight=False,
        width=120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
