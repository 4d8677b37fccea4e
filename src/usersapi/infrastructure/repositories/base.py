"""Repository protocol shared by every storage backend.

Writes against an existing key report their outcome as a
:class:`WriteStatus` value instead of raising, so callers branch on
``NOT_FOUND`` explicitly. Anything else a backend raises is an
unexpected failure and propagates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Protocol

from usersapi.domain.users import User, UserInput

# Opaque cursor. DynamoDB uses a key map, SQL uses the last id.
ContinuationToken = Any


class WriteStatus(StrEnum):
    """Outcome of an update or delete against a single key."""

    APPLIED = "applied"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ScanPage:
    """One page of a full-table scan.

    ``next_token`` is ``None`` when the scan is complete.
    """

    items: list[User] = field(default_factory=list)
    next_token: ContinuationToken | None = None


class UserRepository(Protocol):
    """Key-value storage for user records, keyed by ``id``."""

    def put(self, user: User) -> None:
        """Insert or replace the full record for ``user.id``."""
        ...

    def scan_page(self, token: ContinuationToken | None = None) -> ScanPage:
        """Return one page of records, starting after *token*."""
        ...

    def update(self, user_id: str, fields: UserInput) -> WriteStatus:
        """Overwrite ``name`` and ``email`` on an existing record."""
        ...

    def delete(self, user_id: str) -> WriteStatus:
        """Remove an existing record."""
        ...

    def close(self) -> None:
        """Release any held connections."""
        ...
