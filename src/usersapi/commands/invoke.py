"""invoke: run one request through the handler locally."""

from __future__ import annotations

import click

from usersapi.commands._base import UsersCommand
from usersapi.commands._context import AppContext


def _parse_params(values: tuple[str, ...]) -> dict[str, str]:
    params: dict[str, str] = {}
    for raw in values:
        key, sep, value = raw.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected KEY=VALUE, got {raw!r}", param_hint="--param")
        params[key] = value
    return params


@click.command(
    cls=UsersCommand,
    examples="""\
  # Create a user
  usersapi invoke POST /users --body '{"name": "Ada", "email": "ada@example.com"}'

  # List all users as the raw response envelope
  usersapi --json invoke GET /users

  # Update by concrete path (id taken from the path)
  usersapi invoke PATCH /users/3f0c... --body '{"name": "Ada L", "email": "ada@example.com"}'

  # Delete via the route pattern and an explicit path parameter
  usersapi invoke DELETE '/users/{id}' --param id=3f0c...""",
)
@click.argument("method")
@click.argument("path")
@click.option("--body", default=None, help="Raw request body (JSON text).")
@click.option(
    "--param",
    "params",
    multiple=True,
    metavar="KEY=VALUE",
    help="Path parameter (repeatable).",
)
@click.pass_obj
def invoke(app: AppContext, method: str, path: str, body: str | None, params: tuple[str, ...]) -> None:
    """Send METHOD PATH through the request pipeline and print the response."""
    from usersapi.api.events import DEFAULT_ROUTE_KEY, build_event

    path_parameters = _parse_params(params) or None
    # A pattern path ("/users/{id}") is sent as the route key, like API
    # Gateway does; a concrete path is routed by the raw path.
    route_key = None if "{" in path else DEFAULT_ROUTE_KEY
    event = build_event(
        method,
        path,
        body=body,
        path_parameters=path_parameters,
        route_key=route_key,
    )
    app.emit(app.api.handle(event))
