"""Rich Console factory and theme for usersapi output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_response() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

USERS_THEME = Theme(
    {
        "users.ok": "bold green",
        "users.client_error": "bold yellow",
        "users.server_error": "bold red",
        "users.key": "dim",
    }
)


def status_style(status_code: int) -> str:
    """Theme style for an HTTP status code."""
    if status_code >= 500:
        return "users.server_error"
    if status_code >= 400:
        return "users.client_error"
    return "users.ok"


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=USERS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
