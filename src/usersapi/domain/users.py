"""User models: the persisted record and the caller-supplied input.

``UserInput`` is the only shape a caller may send. Unknown keys are
dropped, so an ``id`` in a request body never reaches storage.
"""

from __future__ import annotations

from typing import Annotated

from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _check_email_syntax(value: str) -> str:
    """Reject malformed addresses; return *value* exactly as sent.

    Only syntax is checked: no DNS lookup is made, and the address is
    stored without case or Unicode normalization.
    """
    validate_email(value, check_deliverability=False, globally_deliverable=False)
    return value


EmailAddress = Annotated[str, AfterValidator(_check_email_syntax)]


class UserInput(BaseModel):
    """Validated create/update payload: exactly ``name`` and ``email``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1)
    email: EmailAddress


class User(BaseModel):
    """A persisted user record."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str

    @classmethod
    def from_input(cls, user_id: str, data: UserInput) -> User:
        """Combine a server-generated *user_id* with validated input."""
        return cls(id=user_id, name=data.name, email=data.email)
