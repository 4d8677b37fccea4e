"""AWS Lambda entry point.

Handler string: ``usersapi.entrypoint.lambda_handler``.

Settings, logging and the repository client are built at import time
(the Lambda init phase) and reused across invocations. A missing
``USERS_TABLE_NAME`` raises :class:`ConfigurationError` here, so the
function fails to initialize instead of failing each request.
"""

from __future__ import annotations

from typing import Any

from usersapi.api.handler import UsersApi
from usersapi.api.responses import JsonResponse
from usersapi.config.logging import configure_logging
from usersapi.config.settings import UsersApiSettings


def build_api(**overrides: Any) -> UsersApi:
    """Load settings from the environment and build the handler."""
    settings = UsersApiSettings.load(**overrides)
    configure_logging(level=settings.log_level, log_json=settings.log_json)
    return UsersApi.from_settings(settings)


api = build_api()


def lambda_handler(event: dict[str, Any], context: Any) -> JsonResponse:
    """Lambda handler for the users HTTP API."""
    return api.handle(event)
