"""Result-to-HTTP mapping and the error code registry."""

import json
from dataclasses import dataclass

import pytest

from app.application.dtos.brand import BrandResult
from app.core.error_registry import (
    ERROR_CODES,
    get_error_definition,
    get_http_status,
    is_error_code,
)
from app.domain.exceptions import UserNotFoundError
from app.infrastructure.exceptions import DatabaseError
from app.shared.result import err, ok
from app.shared.utils.result_response import result_to_response


@dataclass(frozen=True)
class _Error:
    code: str
    message: str


def _body(response) -> dict:
    return json.loads(response.body)


class TestResultToResponse:
    def test_success_defaults_to_200(self) -> None:
        response = result_to_response(ok({"id": "1"}))
        assert response.status_code == 200
        assert _body(response) == {"success": True, "data": {"id": "1"}}

    def test_success_with_explicit_status(self) -> None:
        response = result_to_response(ok(BrandResult(id="b1", ref_id=1, name="Renault")), 201)
        assert response.status_code == 201
        assert _body(response)["data"] == {"id": "b1", "ref_id": 1, "name": "Renault"}

    def test_success_with_none(self) -> None:
        assert _body(result_to_response(ok(None))) == {"success": True, "data": None}

    def test_user_not_found_is_404(self) -> None:
        response = result_to_response(err(UserNotFoundError("u1")))
        assert response.status_code == 404
        assert _body(response) == {
            "success": False,
            "error": {"code": "USER_NOT_FOUND", "message": "User not found: u1"},
        }

    def test_unknown_code_is_500(self) -> None:
        response = result_to_response(err(_Error(code="SOMETHING_ODD", message="?")))
        assert response.status_code == 500
        assert _body(response)["error"]["code"] == "SOMETHING_ODD"

    def test_repository_error_passes_code_through(self) -> None:
        response = result_to_response(err(DatabaseError("query failed")))
        assert response.status_code == 500
        assert _body(response)["error"] == {"code": "DATABASE_ERROR", "message": "query failed"}


class TestErrorRegistry:
    @pytest.mark.parametrize(
        ("code", "status"),
        [
            ("USER_ALREADY_EXISTS", 409),
            ("INVALID_CREDENTIALS", 401),
            ("NO_SEATS_AVAILABLE", 400),
            ("RELATION_CONSTRAINT", 409),
            ("CACHE_CONNECTION_ERROR", 502),
            ("FORBIDDEN", 403),
            ("SERVICE_UNAVAILABLE", 503),
        ],
    )
    def test_known_codes(self, code: str, status: int) -> None:
        assert get_http_status(code) == status
        assert is_error_code(code)

    def test_unknown_code_falls_back_to_internal_error(self) -> None:
        definition = get_error_definition("NOPE")
        assert definition.code == "INTERNAL_ERROR"
        assert definition.http_status == 500
        assert not is_error_code("NOPE")

    def test_entries_are_keyed_by_their_code(self) -> None:
        assert all(code == d.code for code, d in ERROR_CODES.items())
