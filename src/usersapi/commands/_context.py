"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Settings and the handler are built lazily on first
use so ``--help`` and ``--version`` work without ``USERS_TABLE_NAME``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from usersapi.config.settings import ConfigurationError, UsersApiSettings
from usersapi.output.formatters import OutputSettings, format_response

if TYPE_CHECKING:
    from usersapi.api.handler import UsersApi
    from usersapi.api.responses import JsonResponse


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(
        self,
        *,
        json_output: bool = False,
        verbose: bool = False,
        log_json: bool = False,
        overrides: dict[str, Any] | None = None,
    ) -> None:
        self.json_output = json_output
        self.verbose = verbose
        self._overrides = dict(overrides or {})
        self._settings: UsersApiSettings | None = None
        self._api: UsersApi | None = None

        from usersapi.config.logging import configure_logging

        configure_logging(level="DEBUG" if verbose else "WARNING", log_json=log_json)

    @property
    def settings(self) -> UsersApiSettings:
        """Settings loaded from the environment (created lazily on first access)."""
        if self._settings is None:
            try:
                self._settings = UsersApiSettings.load(**self._overrides)
            except ConfigurationError as exc:
                raise click.ClickException(str(exc)) from exc
        return self._settings

    @property
    def api(self) -> UsersApi:
        """The request handler (created lazily on first access)."""
        if self._api is None:
            from usersapi.api.handler import UsersApi

            self._api = UsersApi.from_settings(self.settings)
        return self._api

    def emit(self, response: JsonResponse) -> None:
        """Print a response envelope; exit with code 1 for 4xx/5xx."""
        output = format_response(response, settings=OutputSettings(json_output=self.json_output))
        if response["statusCode"] < 400:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
