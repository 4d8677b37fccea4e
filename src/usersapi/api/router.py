"""Static route table: four (method, pattern) pairs over ``/users``.

Lookup is exact on the pattern first (``PATCH /users/{id}`` as sent in
``routeKey``), then segment-wise against concrete paths
(``PATCH /users/abc``), capturing the single ``{id}`` segment. No
wildcards, no prefix matching. Anything else is unmatched and answered
with :data:`DEFAULT_ROUTE_STATUS`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

DEFAULT_ROUTE_STATUS = 404


class Operation(StrEnum):
    CREATE_USER = "create_user"
    LIST_USERS = "list_users"
    UPDATE_USER = "update_user"
    DELETE_USER = "delete_user"


ROUTES: dict[tuple[str, str], Operation] = {
    ("POST", "/users"): Operation.CREATE_USER,
    ("GET", "/users"): Operation.LIST_USERS,
    ("PATCH", "/users/{id}"): Operation.UPDATE_USER,
    ("DELETE", "/users/{id}"): Operation.DELETE_USER,
}


@dataclass(frozen=True)
class RouteMatch:
    """A resolved route and any parameters captured from a concrete path."""

    operation: Operation
    method: str
    pattern: str
    path_params: dict[str, str] = field(default_factory=dict)

    @property
    def route_key(self) -> str:
        return f"{self.method} {self.pattern}"


def _is_param(segment: str) -> bool:
    return len(segment) > 2 and segment.startswith("{") and segment.endswith("}")


def _match_segments(pattern: str, path: str) -> dict[str, str] | None:
    expected = pattern.split("/")
    actual = path.split("/")
    if len(expected) != len(actual):
        return None
    params: dict[str, str] = {}
    for want, got in zip(expected, actual, strict=True):
        if _is_param(want):
            if not got:
                return None
            params[want[1:-1]] = got
        elif want != got:
            return None
    return params


def match_route(method: str, path: str) -> RouteMatch | None:
    """Resolve *method* and *path* to a route, or None if unmatched."""
    method = method.upper()
    operation = ROUTES.get((method, path))
    if operation is not None:
        return RouteMatch(operation=operation, method=method, pattern=path)

    for (route_method, pattern), operation in ROUTES.items():
        if route_method != method:
            continue
        params = _match_segments(pattern, path)
        if params is not None:
            return RouteMatch(
                operation=operation, method=method, pattern=pattern, path_params=params
            )
    return None
