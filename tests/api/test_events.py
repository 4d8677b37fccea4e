"""Tests for the API Gateway v2 event model and builder."""

from __future__ import annotations

import base64

import pytest

from usersapi.api.events import DEFAULT_ROUTE_KEY, ApiEvent, build_event


class TestBuildEvent:
    def test_route_key_from_method_and_path(self) -> None:
        event = build_event("post", "/users", body='{"a": 1}')
        assert event["routeKey"] == "POST /users"
        assert event["body"] == '{"a": 1}'
        assert event["requestContext"]["http"]["method"] == "POST"
        assert "pathParameters" not in event

    def test_path_parameters_and_request_id(self) -> None:
        event = build_event("delete", "/users/{id}", path_parameters={"id": "1"}, request_id="r")
        assert event["pathParameters"] == {"id": "1"}
        assert event["requestContext"]["requestId"] == "r"


class TestMethodAndPath:
    def test_from_route_key(self) -> None:
        event = ApiEvent.model_validate(build_event("patch", "/users/{id}"))
        assert event.method_and_path() == ("PATCH", "/users/{id}")

    def test_default_route_key_uses_raw_path(self) -> None:
        raw = build_event("patch", "/users/abc", route_key=DEFAULT_ROUTE_KEY)
        event = ApiEvent.model_validate(raw)
        assert event.method_and_path() == ("PATCH", "/users/abc")

    def test_missing_route_key_uses_http_context(self) -> None:
        event = ApiEvent.model_validate(
            {"requestContext": {"http": {"method": "get", "path": "/users"}}}
        )
        assert event.method_and_path() == ("GET", "/users")

    def test_nothing_to_route(self) -> None:
        assert ApiEvent.model_validate({}).method_and_path() is None
        assert ApiEvent.model_validate({"routeKey": DEFAULT_ROUTE_KEY}).method_and_path() is None

    def test_extra_fields_ignored(self) -> None:
        event = ApiEvent.model_validate({"routeKey": "GET /users", "headers": {"a": "b"}})
        assert event.route_key == "GET /users"


class TestDecodedBody:
    def test_plain_body(self) -> None:
        assert ApiEvent(body="{}").decoded_body() == "{}"

    def test_absent_body(self) -> None:
        assert ApiEvent().decoded_body() is None

    def test_base64_body(self) -> None:
        encoded = base64.b64encode(b'{"name": "x"}').decode()
        event = ApiEvent.model_validate({"body": encoded, "isBase64Encoded": True})
        assert event.decoded_body() == '{"name": "x"}'

    def test_invalid_base64_raises(self) -> None:
        event = ApiEvent.model_validate({"body": "***", "isBase64Encoded": True})
        with pytest.raises(ValueError):
            event.decoded_body()
