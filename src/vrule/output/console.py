"""Rich Console factory and theme for vrule output.

Consoles render into a StringIO buffer so formatters keep a
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

VRULE_THEME = Theme(
    {
        "vrule.ok": "bold green",
        "vrule.ng": "bold red",
        "vrule.error": "bold red",
        "vrule.warning": "bold yellow",
        "vrule.op": "bold cyan",
        "vrule.key": "dim",
        "vrule.path": "dim",
        "vrule.rule": "bold blue",
    }
)

_OUTCOME_STYLES: dict[str, str] = {
    "ok": "vrule.ok",
    "ng": "vrule.ng",
    "error": "vrule.error",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer without hard wrapping.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=VRULE_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_outcome(outcome: str) -> str:
    """Return the Rich style name for a per-document outcome."""
    return _OUTCOME_STYLES.get(outcome, "")
