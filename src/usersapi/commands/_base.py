"""Shared Click command class for usersapi subcommands.

Request commands take free-form bodies and path parameters, so their
sample invocations are long. They live behind ``--examples`` instead of
in ``--help``.
"""

from __future__ import annotations

from typing import Any

import click


class UsersCommand(click.Command):
    """A command with optional sample invocations.

    Args:
        examples: Text printed by ``--examples``. When omitted the flag is
            not added.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Print sample invocations and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        # Eager, so it runs before METHOD/PATH are required.
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)
