"""BaseService: foundation for service classes.

Every service receives a repository at construction time and never
holds record state of its own between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from usersapi.infrastructure.repositories import UserRepository


class BaseService:
    """Base for service-layer classes.

    Usage::

        class UserService(BaseService):
            def create_user(self, payload: Any) -> ServiceResult:
                self._repository.put(...)
    """

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository
