"""Tests for SqlUserRepository against a temp SQLite database."""

from __future__ import annotations

from usersapi.domain.users import User, UserInput
from usersapi.infrastructure.repositories import WriteStatus
from usersapi.infrastructure.repositories.sql import DEFAULT_PAGE_SIZE, SqlUserRepository


def _user(user_id: str, name: str = "Test") -> User:
    return User(id=user_id, name=name, email=f"{user_id}@test.com")


def _scan_all(repo: SqlUserRepository) -> list[list[User]]:
    pages = []
    token = None
    while True:
        page = repo.scan_page(token)
        pages.append(page.items)
        token = page.next_token
        if token is None:
            return pages


class TestPut:
    def test_inserts(self, sql_repository: SqlUserRepository) -> None:
        sql_repository.put(_user("a"))
        page = sql_repository.scan_page()
        assert page.items == [_user("a")]
        assert page.next_token is None

    def test_replaces_existing_record(self, sql_repository: SqlUserRepository) -> None:
        sql_repository.put(_user("a"))
        sql_repository.put(User(id="a", name="Other", email="other@test.com"))
        assert sql_repository.scan_page().items == [
            User(id="a", name="Other", email="other@test.com")
        ]


class TestScanPage:
    def test_empty_table(self, sql_repository: SqlUserRepository) -> None:
        page = sql_repository.scan_page()
        assert page.items == []
        assert page.next_token is None

    def test_pages_in_id_order(self, sql_repository: SqlUserRepository) -> None:
        for user_id in ("e", "c", "a", "d", "b"):
            sql_repository.put(_user(user_id))
        pages = _scan_all(sql_repository)
        assert [[u.id for u in items] for items in pages] == [["a", "b"], ["c", "d"], ["e"]]

    def test_exact_page_multiple_has_no_trailing_token(
        self, sql_repository: SqlUserRepository
    ) -> None:
        for user_id in ("a", "b", "c", "d"):
            sql_repository.put(_user(user_id))
        first = sql_repository.scan_page()
        assert first.next_token == "b"
        second = sql_repository.scan_page(first.next_token)
        assert [u.id for u in second.items] == ["c", "d"]
        assert second.next_token is None

    def test_default_page_size(self, sql_repository: SqlUserRepository) -> None:
        repo = SqlUserRepository(sql_repository.engine, sql_repository.table)
        repo.put(_user("a"))
        assert len(repo.scan_page().items) == 1
        assert DEFAULT_PAGE_SIZE == 100


class TestUpdate:
    def test_applies(self, sql_repository: SqlUserRepository) -> None:
        sql_repository.put(_user("a"))
        status = sql_repository.update("a", UserInput(name="New", email="new@test.com"))
        assert status is WriteStatus.APPLIED
        assert sql_repository.scan_page().items == [User(id="a", name="New", email="new@test.com")]

    def test_missing_record(self, sql_repository: SqlUserRepository) -> None:
        status = sql_repository.update("nope", UserInput(name="New", email="new@test.com"))
        assert status is WriteStatus.NOT_FOUND
        assert sql_repository.scan_page().items == []


class TestDelete:
    def test_applies(self, sql_repository: SqlUserRepository) -> None:
        sql_repository.put(_user("a"))
        sql_repository.put(_user("b"))
        assert sql_repository.delete("a") is WriteStatus.APPLIED
        assert [u.id for u in sql_repository.scan_page().items] == ["b"]

    def test_missing_record(self, sql_repository: SqlUserRepository) -> None:
        assert sql_repository.delete("nope") is WriteStatus.NOT_FOUND

    def test_second_delete_not_found(self, sql_repository: SqlUserRepository) -> None:
        sql_repository.put(_user("a"))
        assert sql_repository.delete("a") is WriteStatus.APPLIED
        assert sql_repository.delete("a") is WriteStatus.NOT_FOUND
