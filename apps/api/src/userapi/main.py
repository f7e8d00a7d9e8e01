"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from userapi.config import Settings, get_settings
from userapi.middleware import setup_middleware
from userapi.routes import api_router
from userapi.services import init_services

# Configure logging
settings = get_settings()
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Handle application lifespan events."""
    app_settings: Settings = app.state.settings
    logger.info(f"{app_settings.app_name} v{app_settings.app_version} started")
    logger.info(f"Environment: {app_settings.environment}")
    logger.info(f"Log level: {app_settings.log_level}")

    yield

    logger.info(f"{app_settings.app_name} shutting down")


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed bodies and path parameters with a JSON 400."""
    logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid request data",
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap framework errors (unknown route, wrong method) in the ``{"error": ...}`` envelope."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the application with its own empty user store.

    Args:
        app_settings: Settings to run with; read from the environment when omitted

    Returns:
        Configured FastAPI application
    """
    app_settings = app_settings or get_settings()
    docs_enabled = app_settings.is_development

    application = FastAPI(
        title=app_settings.app_name,
        description="User API - in-memory user CRUD service",
        version=app_settings.app_version,
        lifespan=lifespan,
        redirect_slashes=False,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    init_services(application, app_settings)
    setup_middleware(application)
    application.add_exception_handler(RequestValidationError, validation_error_handler)
    application.add_exception_handler(StarletteHTTPException, http_error_handler)
    application.include_router(api_router)
    return application


app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "userapi.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
