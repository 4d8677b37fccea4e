"""Request-level input checks: body parsing and path parameters.

Schema validation of the parsed body lives in the service layer
(``UserInput``); this module only turns raw request pieces into values
or raises :class:`ReportedError` with a 400.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from usersapi.api.errors import ReportedError

BODY_PARSING_MESSAGE = "Body parsing error."


def parse_json_body(body: str | None) -> Any:
    """Parse a JSON request body.

    An absent or empty body is a parsing error: every operation that
    reads a body requires one.
    """
    if body:
        try:
            return json.loads(body)
        except ValueError:
            pass
    raise ReportedError(400, BODY_PARSING_MESSAGE)


def get_path_param(params: Mapping[str, str] | None, name: str) -> str:
    """Return a non-empty path parameter or raise a 400."""
    value = (params or {}).get(name)
    if not value:
        raise ReportedError(400, f"Param {name} not found.")
    return value
