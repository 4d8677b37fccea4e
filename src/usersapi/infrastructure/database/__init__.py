"""SQLite database engine and schema via SQLAlchemy Core."""

from usersapi.infrastructure.database.engine import create_db_engine, init_database
from usersapi.infrastructure.database.schema import users_table

__all__ = [
    "create_db_engine",
    "init_database",
    "users_table",
]
