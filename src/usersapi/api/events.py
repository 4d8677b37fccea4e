"""Inbound event model: the subset of an API Gateway HTTP API (v2) payload we read.

Only the fields the pipeline consumes are modelled; everything else in
the event is ignored.
"""

from __future__ import annotations

import base64
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ROUTE_KEY = "$default"


class HttpContext(BaseModel):
    """``requestContext.http``."""

    model_config = ConfigDict(extra="ignore")

    method: str = ""
    path: str = ""


class RequestContext(BaseModel):
    """``requestContext``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    request_id: str | None = Field(default=None, alias="requestId")
    http: HttpContext | None = None


class ApiEvent(BaseModel):
    """Parsed API Gateway v2 event."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    route_key: str | None = Field(default=None, alias="routeKey")
    raw_path: str | None = Field(default=None, alias="rawPath")
    body: str | None = None
    is_base64_encoded: bool = Field(default=False, alias="isBase64Encoded")
    path_parameters: dict[str, str] | None = Field(default=None, alias="pathParameters")
    request_context: RequestContext | None = Field(default=None, alias="requestContext")

    @property
    def request_id(self) -> str | None:
        return self.request_context.request_id if self.request_context else None

    def method_and_path(self) -> tuple[str, str] | None:
        """Return ``(METHOD, path)`` for routing, or None if the event names neither.

        A concrete ``routeKey`` already carries the normalized pattern.
        For ``$default`` (or no route key) the raw request line is used.
        """
        if self.route_key and self.route_key != DEFAULT_ROUTE_KEY:
            method, sep, path = self.route_key.partition(" ")
            if not sep:
                return None
            return method.upper(), path

        http = self.request_context.http if self.request_context else None
        if http is None or not http.method:
            return None
        path = self.raw_path or http.path
        if not path:
            return None
        return http.method.upper(), path

    def decoded_body(self) -> str | None:
        """Return the body as text, undoing API Gateway base64 encoding.

        Raises ValueError if a base64 body is not valid base64 / UTF-8.
        """
        if self.body is None or not self.is_base64_encoded:
            return self.body
        return base64.b64decode(self.body, validate=True).decode("utf-8")


def build_event(
    method: str,
    path: str,
    *,
    body: str | None = None,
    path_parameters: dict[str, str] | None = None,
    route_key: str | None = None,
    request_id: str | None = None,
) -> dict[str, Any]:
    """Construct an API Gateway v2 event dict.

    ``route_key`` defaults to ``"{METHOD} {path}"``. Pass
    :data:`DEFAULT_ROUTE_KEY` to route by the raw path instead.
    """
    method = method.upper()
    event: dict[str, Any] = {
        "version": "2.0",
        "routeKey": route_key if route_key is not None else f"{method} {path}",
        "rawPath": path,
        "requestContext": {"http": {"method": method, "path": path}},
        "isBase64Encoded": False,
    }
    if request_id is not None:
        event["requestContext"]["requestId"] = request_id
    if body is not None:
        event["body"] = body
    if path_parameters is not None:
        event["pathParameters"] = path_parameters
    return event
