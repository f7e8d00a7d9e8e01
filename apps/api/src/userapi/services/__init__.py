"""Service initialization and dependency injection."""

import logging

from fastapi import FastAPI, Request
from userapi.config import Settings
from userapi.services.user_service import UserService
from userapi.services.user_store import UserStore

logger = logging.getLogger(__name__)


def init_services(app: FastAPI, settings: Settings) -> None:
    """Attach settings and a fresh, empty user service to the application.

    Args:
        app: FastAPI application instance
        settings: Application settings
    """
    app.state.settings = settings
    app.state.user_service = UserService(UserStore())
    logger.info("Initialized in-memory UserService")


def get_app_settings(request: Request) -> Settings:
    """Get the settings the running application was built with."""
    return request.app.state.settings


def get_user_service(request: Request) -> UserService:
    """Get the user service owned by the running application.

    Args:
        request: Incoming request

    Returns:
        UserService instance
    """
    return request.app.state.user_service


__all__ = ["UserService", "UserStore", "get_app_settings", "get_user_service", "init_services"]
