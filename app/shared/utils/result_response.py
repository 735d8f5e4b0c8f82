"""Result-to-HTTP mapping used by endpoints that receive a Result from a use case.

Success -> ``{"success": true, "data": value}`` (200 or the given status).
Failure -> ``{"success": false, "error": {"code", "message"}}`` with the
status registered for ``error.code`` (500 when unknown).
"""

from typing import Any, Protocol

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.core.error_registry import get_http_status
from app.shared.result import Ok, Result


class ErrorWithCode(Protocol):
    code: str
    message: str


def result_to_response(
    result: Result[Any, ErrorWithCode], success_status: int = 200
) -> JSONResponse:
    """Translate a Result into a JSON response. Pure; no logging or side effects."""
    if isinstance(result, Ok):
        return JSONResponse(
            status_code=success_status,
            content={"success": True, "data": jsonable_encoder(result.value)},
        )
    error = result.error
    return JSONResponse(
        status_code=get_http_status(error.code),
        content={
            "success": False,
            "error": {"code": error.code, "message": error.message},
        },
    )
