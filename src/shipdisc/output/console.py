"""Rich Console factory and theme for shipdisc output.

Consoles render into a StringIO buffer so formatters can return plain
strings. In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SHIPDISC_THEME = Theme(
    {
        "sd.ok": "bold green",
        "sd.error": "bold red",
        "sd.warning": "bold yellow",
        "sd.op": "bold cyan",
        "sd.key": "dim",
        "sd.amount": "magenta",
    }
)

_SEVERITY_STYLES: dict[str, str] = {
    "error": "sd.error",
    "warning": "sd.warning",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=SHIPDISC_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_severity(severity: str) -> str:
    return _SEVERITY_STYLES.get(severity, "")
