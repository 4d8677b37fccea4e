"""User identifier generation.

INVARIANT: IDs are assigned once, server-side, at creation time and
never change. Callers never supply them.
"""

from __future__ import annotations

import uuid


def generate_user_id() -> str:
    """Return a fresh random identifier (UUID4, canonical string form)."""
    return str(uuid.uuid4())
