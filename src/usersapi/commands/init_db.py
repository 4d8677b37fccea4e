"""init-db: create the local SQLite users table."""

from __future__ import annotations

import click

from usersapi.commands._base import UsersCommand
from usersapi.commands._context import AppContext


@click.command(
    "init-db",
    cls=UsersCommand,
    examples="""\
  # Create users.db in the current directory
  USERS_TABLE_NAME=users usersapi --backend sqlite init-db

  # Custom location
  usersapi --table users --backend sqlite --database /tmp/dev/users.db init-db""",
)
@click.pass_obj
def init_db(app: AppContext) -> None:
    """Create the SQLite database and users table (sqlite backend only)."""
    settings = app.settings
    if settings.backend != "sqlite":
        raise click.ClickException(
            f"init-db requires the sqlite backend (configured: {settings.backend})"
        )

    from usersapi.infrastructure.database.engine import init_database

    engine, table = init_database(settings.database_path, settings.users_table_name)
    engine.dispose()
    click.echo(f"Initialized table '{table.name}' at {settings.database_path}")
