"""SQLAlchemy Core table definition for the local users table.

The table name comes from configuration (``USERS_TABLE_NAME``), so the
table is built per call rather than declared at import time.
"""

from __future__ import annotations

from sqlalchemy import Column, MetaData, Table, Text


def users_table(name: str, metadata: MetaData | None = None) -> Table:
    """Build the ``users`` table under *name*.

    Mirrors the DynamoDB item shape: ``id`` key plus two string attributes.
    """
    return Table(
        name,
        metadata if metadata is not None else MetaData(),
        Column("id", Text, primary_key=True),
        Column("name", Text, nullable=False),
        Column("email", Text, nullable=False),
    )
