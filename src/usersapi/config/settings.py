"""Runtime settings: environment variables and explicit overrides in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags or test overrides
  2. Env vars: ``USERS_API_*`` prefix, plus ``USERS_TABLE_NAME``
     and ``AWS_REGION`` which keep their conventional names
  3. Code defaults

The table name has no default. A process without it refuses to start:
:meth:`UsersApiSettings.load` raises :class:`ConfigurationError` instead
of letting the first request fail.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when the process cannot be configured from its environment."""


class UsersApiSettings(BaseSettings):
    """Unified settings for the handler, repositories and CLI.

    Attributes:
        users_table_name: Backing table (DynamoDB) or SQL table name.
        backend: Which repository implementation to build.
        database_path: SQLite file used by the ``sqlite`` backend.
        page_size: Scan page size. ``None`` leaves it to the backend.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="USERS_API_",
        extra="ignore",
    )

    users_table_name: str = Field(
        min_length=1,
        validation_alias=AliasChoices("users_table_name", "USERS_TABLE_NAME"),
    )
    backend: Literal["dynamodb", "sqlite"] = "dynamodb"
    database_path: Path = Path("users.db")
    page_size: int | None = Field(default=None, ge=1)

    # --- AWS client ---
    aws_region: str | None = Field(
        default=None,
        validation_alias=AliasChoices("aws_region", "AWS_REGION"),
    )
    dynamodb_endpoint_url: str | None = None

    # --- Logging ---
    log_level: str = "INFO"
    log_json: bool = True

    @classmethod
    def load(cls, **overrides: Any) -> UsersApiSettings:
        """Build settings from the environment, failing fast on bad config."""
        try:
            return cls(**overrides)
        except ValidationError as exc:
            errors = exc.errors()
            if any(err["type"] == "missing" for err in errors):
                msg = "USERS_TABLE_NAME is required."
            else:
                fields = sorted({".".join(str(p) for p in err["loc"]) for err in errors})
                msg = f"Invalid configuration for: {', '.join(fields)}"
            raise ConfigurationError(msg) from exc
