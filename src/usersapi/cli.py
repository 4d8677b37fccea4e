"""Root CLI group for usersapi with global flags and command registration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from usersapi import __version__
from usersapi.commands import register_commands
from usersapi.commands._context import AppContext


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="usersapi")
@click.option("--json", "json_output", is_flag=True, help="Print the raw JSON envelope.")
@click.option("-v", "--verbose", is_flag=True, help="Debug-level logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--table", "table_name", default=None, help="Override USERS_TABLE_NAME.")
@click.option(
    "--backend",
    type=click.Choice(["dynamodb", "sqlite"]),
    default=None,
    help="Override USERS_API_BACKEND.",
)
@click.option(
    "--database",
    "database_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Override USERS_API_DATABASE_PATH (sqlite backend).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    table_name: str | None,
    backend: str | None,
    database_path: Path | None,
) -> None:
    """usersapi: local driver for the users HTTP API."""
    overrides: dict[str, Any] = {
        key: value
        for key, value in (
            ("users_table_name", table_name),
            ("backend", backend),
            ("database_path", database_path),
        )
        if value is not None
    }
    ctx.obj = AppContext(
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
        overrides=overrides,
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
