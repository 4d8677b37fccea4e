"""SQL-backed user repository (SQLAlchemy Core, SQLite in practice).

Scans use keyset pagination ordered by ``id``; the continuation token is
the last id of the returned page. One extra row is fetched per page to
tell whether another page exists, so the final page never carries a
token.
"""

from __future__ import annotations

from sqlalchemy import Table, delete, select, update
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.engine import Engine

from usersapi.domain.users import User, UserInput
from usersapi.infrastructure.repositories.base import ContinuationToken, ScanPage, WriteStatus

DEFAULT_PAGE_SIZE = 100


class SqlUserRepository:
    """User repository over one SQL table."""

    def __init__(self, engine: Engine, table: Table, *, page_size: int | None = None) -> None:
        self._engine = engine
        self._table = table
        self._page_size = page_size or DEFAULT_PAGE_SIZE

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def table(self) -> Table:
        return self._table

    def put(self, user: User) -> None:
        t = self._table
        stmt = insert(t).values(id=user.id, name=user.name, email=user.email)
        stmt = stmt.on_conflict_do_update(
            index_elements=[t.c.id],
            set_={"name": stmt.excluded.name, "email": stmt.excluded.email},
        )
        with self._engine.begin() as conn:
            conn.execute(stmt)

    def scan_page(self, token: ContinuationToken | None = None) -> ScanPage:
        t = self._table
        stmt = select(t.c.id, t.c.name, t.c.email).order_by(t.c.id).limit(self._page_size + 1)
        if token is not None:
            stmt = stmt.where(t.c.id > str(token))

        with self._engine.connect() as conn:
            rows = conn.execute(stmt).fetchall()

        has_more = len(rows) > self._page_size
        rows = rows[: self._page_size]
        items = [User(id=row.id, name=row.name, email=row.email) for row in rows]
        next_token = items[-1].id if has_more else None
        return ScanPage(items=items, next_token=next_token)

    def update(self, user_id: str, fields: UserInput) -> WriteStatus:
        t = self._table
        stmt = update(t).where(t.c.id == user_id).values(name=fields.name, email=fields.email)
        with self._engine.begin() as conn:
            result = conn.execute(stmt)
        return WriteStatus.APPLIED if result.rowcount else WriteStatus.NOT_FOUND

    def delete(self, user_id: str) -> WriteStatus:
        t = self._table
        with self._engine.begin() as conn:
            result = conn.execute(delete(t).where(t.c.id == user_id))
        return WriteStatus.APPLIED if result.rowcount else WriteStatus.NOT_FOUND

    def close(self) -> None:
        self._engine.dispose()
