"""Tests for body parsing and path-parameter extraction."""

from __future__ import annotations

import pytest

from usersapi.api.errors import ReportedError
from usersapi.api.validation import get_path_param, parse_json_body


class TestParseJsonBody:
    def test_returns_parsed_body(self) -> None:
        assert parse_json_body('{"test": "object", "value": 1}') == {"test": "object", "value": 1}

    def test_non_object_documents_parse(self) -> None:
        assert parse_json_body("[1, 2]") == [1, 2]
        assert parse_json_body("null") is None

    @pytest.mark.parametrize("body", ['{"invalid":', "", None, "{'single': 'quotes'}"])
    def test_raises_on_invalid_body(self, body: str | None) -> None:
        with pytest.raises(ReportedError) as exc_info:
            parse_json_body(body)
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Body parsing error."


class TestGetPathParam:
    def test_returns_value(self) -> None:
        assert get_path_param({"id": "123"}, "id") == "123"

    @pytest.mark.parametrize("params", [None, {}, {"id": ""}, {"other": "123"}])
    def test_raises_on_missing_param(self, params: dict[str, str] | None) -> None:
        with pytest.raises(ReportedError) as exc_info:
            get_path_param(params, "id")
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Param id not found."


class TestReportedError:
    def test_default_message(self) -> None:
        err = ReportedError(404)
        assert err.message == "Internal server error."
        assert str(err) == "Internal server error."

    def test_repr(self) -> None:
        assert repr(ReportedError(400, "bad")) == "ReportedError(400, 'bad')"
