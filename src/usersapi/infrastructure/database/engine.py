"""Database engine setup for the local SQLite backend.

SQLite stands in for DynamoDB during local development and tests: WAL
mode for concurrent reads, one table keyed by ``id``.

SQLAlchemy Core (not ORM) is used because each request issues a single
statement against a single table. No identity map needed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import Table, create_engine, event
from sqlalchemy.engine import Engine

from usersapi.infrastructure.database.schema import users_table


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode enabled."""
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


def init_database(db_path: Path, table_name: str) -> tuple[Engine, Table]:
    """Initialize the SQLite database at *db_path* and create the users table.

    Creates missing parent directories. Idempotent: safe to call on an
    existing database.

    Returns the engine and the bound table.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(db_path)
    table = users_table(table_name)
    table.metadata.create_all(engine)
    return engine, table
