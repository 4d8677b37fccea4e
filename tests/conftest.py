"""Shared pytest fixtures for usersapi tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from usersapi.api.handler import UsersApi
from usersapi.config.settings import UsersApiSettings
from usersapi.domain.users import User, UserInput
from usersapi.infrastructure.database.engine import init_database
from usersapi.infrastructure.repositories import ScanPage, WriteStatus
from usersapi.infrastructure.repositories.sql import SqlUserRepository
from usersapi.services.users import UserService

TEST_USER_ID = "test-uuid"


class RecordingRepository:
    """In-test repository that records calls and serves canned pages.

    * ``pages`` maps a continuation token to the page returned for it.
    * ``missing`` holds ids that update/delete report as NOT_FOUND.
    * ``error``, when set, is raised by every call after recording it.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.pages: dict[Any, ScanPage] = {None: ScanPage()}
        self.missing: set[str] = set()
        self.error: Exception | None = None

    def _record(self, *call: Any) -> None:
        self.calls.append(call)
        if self.error is not None:
            raise self.error

    def put(self, user: User) -> None:
        self._record("put", user)

    def scan_page(self, token: Any = None) -> ScanPage:
        self._record("scan_page", token)
        return self.pages[token]

    def update(self, user_id: str, fields: UserInput) -> WriteStatus:
        self._record("update", user_id, fields)
        return WriteStatus.NOT_FOUND if user_id in self.missing else WriteStatus.APPLIED

    def delete(self, user_id: str) -> WriteStatus:
        self._record("delete", user_id)
        return WriteStatus.NOT_FOUND if user_id in self.missing else WriteStatus.APPLIED

    def close(self) -> None:
        return None


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host environment from leaking into settings."""
    for name in (
        "USERS_TABLE_NAME",
        "AWS_REGION",
        "USERS_API_BACKEND",
        "USERS_API_DATABASE_PATH",
        "USERS_API_PAGE_SIZE",
        "USERS_API_DYNAMODB_ENDPOINT_URL",
        "USERS_API_LOG_LEVEL",
        "USERS_API_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by the code under test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("usersapi")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def fixed_user_id(monkeypatch: pytest.MonkeyPatch) -> str:
    """Make every created user get ``TEST_USER_ID``."""
    monkeypatch.setattr("usersapi.services.users.generate_user_id", lambda: TEST_USER_ID)
    return TEST_USER_ID


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sqlite_settings(tmp_path: Path) -> UsersApiSettings:
    """Settings for the SQLite backend under a temp directory."""
    return UsersApiSettings.load(
        users_table_name="users",
        backend="sqlite",
        database_path=tmp_path / "users.db",
    )


@pytest.fixture
def sql_repository(tmp_path: Path) -> Generator[SqlUserRepository]:
    """SQLite-backed repository with a small page size to force paging."""
    engine, table = init_database(tmp_path / "users.db", "users")
    repo = SqlUserRepository(engine, table, page_size=2)
    try:
        yield repo
    finally:
        repo.close()


@pytest.fixture
def recording_repository() -> RecordingRepository:
    return RecordingRepository()


@pytest.fixture
def api(recording_repository: RecordingRepository) -> UsersApi:
    """Handler over the recording repository."""
    return UsersApi(UserService(recording_repository))


@pytest.fixture
def sql_api(sql_repository: SqlUserRepository) -> UsersApi:
    """Handler over a real SQLite repository."""
    return UsersApi(UserService(sql_repository))
