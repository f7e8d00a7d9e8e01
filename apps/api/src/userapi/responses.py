"""Translation of service results into HTTP responses."""

from typing import Any

from fastapi import Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from userapi.services.results import ErrorKind, ServiceResult

PROBLEM_TYPE = "https://tools.ietf.org/html/rfc9110#section-15.6.1"
PROBLEM_TITLE = "An error occurred while processing your request."
PROBLEM_MEDIA_TYPE = "application/problem+json"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the ``{"error": message}`` body shared by auth, validation and boundary failures."""
    return JSONResponse(status_code=status_code, content={"error": message})


def problem_response(detail: str, expose_detail: bool = True) -> JSONResponse:
    """Build a 500 problem response.

    Args:
        detail: Exception message of the failure
        expose_detail: Whether the message is included in the body

    Returns:
        JSONResponse with an ``application/problem+json`` body
    """
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "type": PROBLEM_TYPE,
            "title": PROBLEM_TITLE,
            "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "detail": f"Unexpected error: {detail}" if expose_detail else "Unexpected error.",
        },
        media_type=PROBLEM_MEDIA_TYPE,
    )


def _encode(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, list):
        return [_encode(item) for item in value]
    return value


def to_response(
    result: ServiceResult,
    status_code: int = status.HTTP_200_OK,
    headers: dict[str, str] | None = None,
    expose_detail: bool = True,
) -> Response:
    """Map a service result onto an HTTP response.

    Args:
        result: Outcome returned by a service call
        status_code: Status used when the result is a success
        headers: Extra headers for a successful response
        expose_detail: Whether problem responses carry the exception message

    Returns:
        The response to send back
    """
    if result.ok:
        if status_code == status.HTTP_204_NO_CONTENT:
            return Response(status_code=status_code, headers=headers)
        return JSONResponse(status_code=status_code, content=_encode(result.value), headers=headers)

    error = result.error
    if error.kind is ErrorKind.VALIDATION:
        return error_response(status.HTTP_400_BAD_REQUEST, error.message)
    if error.kind is ErrorKind.NOT_FOUND:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return problem_response(error.message, expose_detail=expose_detail)
