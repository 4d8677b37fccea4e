"""Typed payload contracts for service results.

These models validate payload shapes before they leave the service
layer so key regressions (for example ``results`` vs ``items``) fail
fast in tests.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

from usersapi.domain.users import User

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="json")


class UserListData(BaseModel):
    """Payload contract for ``UserService.list_users``."""

    results: list[User]
