"""Rich/JSON output helpers for response envelopes.

``usersapi invoke`` renders the handler's envelope for humans (status
line plus pretty-printed body) or machines (``--json``, the envelope
as-is).
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING

from rich.json import JSON
from rich.text import Text

from usersapi.output.console import create_console, get_output, status_style

if TYPE_CHECKING:
    from usersapi.api.responses import JsonResponse


@dataclass(frozen=True)
class OutputSettings:
    """Output flags taken from the root CLI group."""

    json_output: bool = False
    no_color: bool = False


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


def format_response(response: JsonResponse, *, settings: OutputSettings | None = None) -> str:
    """Format a response envelope for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return _json.dumps(response, indent=2)

    console = create_console(no_color=settings.no_color)
    status = response["statusCode"]
    line = Text(f"{status} {_reason(status)}".rstrip(), style=status_style(status))
    console.print(line)
    for key, value in response["headers"].items():
        console.print(Text(f"{key}: {value}", style="users.key"))
    try:
        console.print(JSON(response["body"]))
    except ValueError:
        console.print(response["body"], markup=False)
    return get_output(console).rstrip("\n")
