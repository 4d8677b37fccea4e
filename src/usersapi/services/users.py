"""UserService: create, list, update and delete user records.

Pipeline per operation: VALIDATE → EXECUTE → RESPOND.
Exactly one repository write per create/update/delete; list issues one
scan per page, strictly in sequence.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from usersapi.domain.ids import generate_user_id
from usersapi.domain.users import User, UserInput
from usersapi.infrastructure.repositories import WriteStatus
from usersapi.services.base import BaseService
from usersapi.services.contracts import UserListData, dump_validated
from usersapi.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

INVALID_INPUT = "INVALID_INPUT"
NOT_FOUND = "NOT_FOUND"

INPUT_VALIDATION_MESSAGE = "Input validation error."
USER_NOT_FOUND_MESSAGE = "User not found."


def _failure(op: str, code: str, message: str) -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code=code, message=message))


class UserService(BaseService):
    """Operations over the users repository."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create_user(self, payload: Any) -> ServiceResult:
        """Validate *payload*, assign a fresh id and persist the record."""
        op = "create_user"
        user_input = self._validate(payload)
        if user_input is None:
            return _failure(op, INVALID_INPUT, INPUT_VALIDATION_MESSAGE)

        user = User.from_input(generate_user_id(), user_input)
        self._repository.put(user)
        logger.info("Created user %s", user.id)
        return ServiceResult(ok=True, op=op, data=user.model_dump())

    def list_users(self) -> ServiceResult:
        """Return every record, concatenating scan pages in order."""
        op = "list_users"
        users: list[User] = []
        token = None
        pages = 0
        while True:
            page = self._repository.scan_page(token)
            users.extend(page.items)
            pages += 1
            token = page.next_token
            if token is None:
                break

        logger.debug("Listed %d users across %d pages", len(users), pages)
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(UserListData, {"results": users}),
        )

    def update_user(self, user_id: str, payload: Any) -> ServiceResult:
        """Overwrite ``name`` and ``email`` on an existing record."""
        op = "update_user"
        user_input = self._validate(payload)
        if user_input is None:
            return _failure(op, INVALID_INPUT, INPUT_VALIDATION_MESSAGE)

        status = self._repository.update(user_id, user_input)
        if status is WriteStatus.NOT_FOUND:
            return _failure(op, NOT_FOUND, USER_NOT_FOUND_MESSAGE)

        logger.info("Updated user %s", user_id)
        return ServiceResult(ok=True, op=op)

    def delete_user(self, user_id: str) -> ServiceResult:
        """Remove an existing record."""
        op = "delete_user"
        status = self._repository.delete(user_id)
        if status is WriteStatus.NOT_FOUND:
            return _failure(op, NOT_FOUND, USER_NOT_FOUND_MESSAGE)

        logger.info("Deleted user %s", user_id)
        return ServiceResult(ok=True, op=op)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _validate(payload: Any) -> UserInput | None:
        try:
            return UserInput.model_validate(payload)
        except ValidationError as exc:
            logger.debug("Rejected user input: %d errors", exc.error_count())
            return None
