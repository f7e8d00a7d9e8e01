"""Middleware setup for the FastAPI application.

The request pipeline is an ordered list of interceptors. Each one receives
the request and ``call_next`` and decides whether to continue or answer
directly. The first entry is the outermost layer.
"""

import logging
from collections.abc import Awaitable, Callable, Sequence

from fastapi import FastAPI, Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware
from userapi.responses import error_response

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]
Interceptor = Callable[[Request, CallNext], Awaitable[Response]]

BEARER_PREFIX = "Bearer "
INTERNAL_ERROR = "Internal server error."
MISSING_TOKEN = "Unauthorized: Missing or invalid token."
INVALID_TOKEN = "Unauthorized: Invalid token."


async def error_boundary(request: Request, call_next: CallNext) -> Response:
    """Turn any failure raised further down the pipeline into a generic 500."""
    try:
        return await call_next(request)
    except Exception as e:
        logger.error("Exception: %s", e, exc_info=True)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


async def auth_gate(request: Request, call_next: CallNext) -> Response:
    """Require ``Authorization: Bearer <token>`` matching the configured secret."""
    auth_header = request.headers.get("authorization")
    if not auth_header or not auth_header.strip() or not auth_header.startswith(BEARER_PREFIX):
        return error_response(status.HTTP_401_UNAUTHORIZED, MISSING_TOKEN)

    token = auth_header[len(BEARER_PREFIX) :].strip()
    if token != request.app.state.settings.auth_token:
        return error_response(status.HTTP_401_UNAUTHORIZED, INVALID_TOKEN)

    return await call_next(request)


async def request_logger(request: Request, call_next: CallNext) -> Response:
    """Log ``METHOD PATH => STATUS`` once the response is known."""
    method = request.method
    path = request.url.path
    response = await call_next(request)
    logger.info("%s %s => %s", method, path, response.status_code)
    return response


MIDDLEWARE_CHAIN: tuple[Interceptor, ...] = (
    error_boundary,
    auth_gate,
    request_logger,
)


def setup_middleware(app: FastAPI, chain: Sequence[Interceptor] = MIDDLEWARE_CHAIN) -> None:
    """Setup middleware for the FastAPI application.

    Args:
        app: FastAPI application instance
        chain: Interceptors, outermost first
    """
    # add_middleware wraps everything added before it, so register innermost first
    for interceptor in reversed(chain):
        app.add_middleware(BaseHTTPMiddleware, dispatch=interceptor)

    logger.info("Middleware chain: %s", " -> ".join(interceptor.__name__ for interceptor in chain))
