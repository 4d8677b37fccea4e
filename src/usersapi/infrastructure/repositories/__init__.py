"""User repositories and the settings-driven factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from usersapi.infrastructure.repositories.base import (
    ContinuationToken,
    ScanPage,
    UserRepository,
    WriteStatus,
)

if TYPE_CHECKING:
    from usersapi.config.settings import UsersApiSettings

__all__ = [
    "ContinuationToken",
    "ScanPage",
    "UserRepository",
    "WriteStatus",
    "create_repository",
]


def create_repository(settings: UsersApiSettings) -> UserRepository:
    """Build the repository selected by ``settings.backend``.

    Backend modules are imported lazily so the SQLite path never loads
    boto3 and vice versa.
    """
    if settings.backend == "sqlite":
        from usersapi.infrastructure.database.engine import init_database
        from usersapi.infrastructure.repositories.sql import SqlUserRepository

        engine, table = init_database(settings.database_path, settings.users_table_name)
        return SqlUserRepository(engine, table, page_size=settings.page_size)

    from usersapi.infrastructure.repositories.dynamodb import DynamoUserRepository

    return DynamoUserRepository(
        settings.users_table_name,
        page_size=settings.page_size,
        region_name=settings.aws_region,
        endpoint_url=settings.dynamodb_endpoint_url,
    )
