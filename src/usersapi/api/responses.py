"""The fixed JSON response envelope returned for every request."""

from __future__ import annotations

import json
from typing import Any, TypedDict

JSON_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


class JsonResponse(TypedDict):
    """API Gateway proxy result with a JSON-encoded body."""

    statusCode: int
    headers: dict[str, str]
    body: str


def json_response(status_code: int, value: Any = None) -> JsonResponse:
    """Build the envelope. ``None`` encodes as an empty object."""
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps({} if value is None else value, separators=(",", ":")),
    }
