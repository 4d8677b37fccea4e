"""Subcommand modules for usersapi.

Provides register_commands() which uses deferred imports to keep
``usersapi --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from usersapi.commands.init_db import init_db
    from usersapi.commands.invoke import invoke

    cli.add_command(invoke)
    cli.add_command(init_db)
