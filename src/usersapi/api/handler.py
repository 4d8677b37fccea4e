"""Request pipeline: Routing → Validating → Executing → Responding.

:class:`UsersApi` maps one event to one service call and translates the
outcome into a :class:`JsonResponse`. Every failure short-circuits to the
response step:

* :class:`ReportedError` (bad body, missing path param, service
  ``INVALID_INPUT`` / ``NOT_FOUND``) → its own status and ``{"message"}``,
  logged at info.
* Anything else → 500 with a fixed message, logged with traceback.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from usersapi.api.errors import INTERNAL_ERROR_MESSAGE, ReportedError
from usersapi.api.events import ApiEvent
from usersapi.api.responses import JsonResponse, json_response
from usersapi.api.router import DEFAULT_ROUTE_STATUS, Operation, RouteMatch, match_route
from usersapi.api.validation import get_path_param, parse_json_body
from usersapi.services import users as user_ops
from usersapi.services.users import UserService

if TYPE_CHECKING:
    from usersapi.config.settings import UsersApiSettings
    from usersapi.services.result import ServiceResult

logger = structlog.get_logger(__name__)

# Service error code → HTTP status.
_ERROR_STATUS: dict[str, int] = {
    user_ops.INVALID_INPUT: 400,
    user_ops.NOT_FOUND: 404,
}

_Branch = Callable[[ApiEvent, dict[str, str]], JsonResponse]


class UsersApi:
    """Stateless request handler over a :class:`UserService`."""

    def __init__(self, service: UserService) -> None:
        self._service = service
        self._branches: dict[Operation, _Branch] = {
            Operation.CREATE_USER: self._create_user,
            Operation.LIST_USERS: self._list_users,
            Operation.UPDATE_USER: self._update_user,
            Operation.DELETE_USER: self._delete_user,
        }

    @classmethod
    def from_settings(cls, settings: UsersApiSettings) -> UsersApi:
        """Build the handler and its repository from explicit settings."""
        from usersapi.infrastructure.repositories import create_repository

        return cls(UserService(create_repository(settings)))

    @property
    def service(self) -> UserService:
        return self._service

    def handle(self, event: Mapping[str, Any]) -> JsonResponse:
        """Process one event and return the response envelope. Never raises.

        ``request_id`` and ``route`` are bound to the structlog context only
        for the duration of the call; context bound by the caller survives.
        """
        try:
            request = ApiEvent.model_validate(event)
        except ValidationError:
            logger.exception("request.failed")
            return json_response(500, {"message": INTERNAL_ERROR_MESSAGE})

        # ── ROUTING ──────────────────────────────────────────
        target = request.method_and_path()
        match = match_route(*target) if target is not None else None
        context: dict[str, Any] = {"request_id": request.request_id}
        if match is not None:
            context["route"] = match.route_key

        with structlog.contextvars.bound_contextvars(**context):
            if match is None:
                logger.info("route.unmatched", target=" ".join(target) if target else None)
                return json_response(DEFAULT_ROUTE_STATUS)
            return self._dispatch(match, request)

    def _dispatch(self, match: RouteMatch, request: ApiEvent) -> JsonResponse:
        params = {**(request.path_parameters or {}), **match.path_params}
        try:
            response = self._branches[match.operation](request, params)
        except ReportedError as exc:
            logger.info("request.rejected", status_code=exc.status_code, reason=exc.message)
            return json_response(exc.status_code, {"message": exc.message})
        except Exception:
            logger.exception("request.failed")
            return json_response(500, {"message": INTERNAL_ERROR_MESSAGE})
        logger.info("request.completed", status_code=response["statusCode"])
        return response

    # ------------------------------------------------------------------
    # Branches
    # ------------------------------------------------------------------

    def _create_user(self, request: ApiEvent, params: dict[str, str]) -> JsonResponse:
        payload = self._read_body(request)
        return _respond(self._service.create_user(payload), 201)

    def _list_users(self, request: ApiEvent, params: dict[str, str]) -> JsonResponse:
        return _respond(self._service.list_users(), 200)

    def _update_user(self, request: ApiEvent, params: dict[str, str]) -> JsonResponse:
        user_id = get_path_param(params, "id")
        payload = self._read_body(request)
        return _respond(self._service.update_user(user_id, payload), 200)

    def _delete_user(self, request: ApiEvent, params: dict[str, str]) -> JsonResponse:
        user_id = get_path_param(params, "id")
        return _respond(self._service.delete_user(user_id), 200)

    @staticmethod
    def _read_body(request: ApiEvent) -> Any:
        try:
            body = request.decoded_body()
        except ValueError:
            body = None
        return parse_json_body(body)


def _respond(result: ServiceResult, success_status: int) -> JsonResponse:
    """Translate a ServiceResult into an envelope or a ReportedError."""
    if result.ok:
        return json_response(success_status, result.data)
    if result.error is None:
        msg = f"{result.op} failed without an error payload"
        raise RuntimeError(msg)
    status = _ERROR_STATUS.get(result.error.code)
    if status is None:
        msg = f"Unmapped service error code: {result.error.code}"
        raise RuntimeError(msg)
    raise ReportedError(status, result.error.message)
