"""API models package."""

from userapi.models.user import User, UserInput

__all__ = [
    "User",
    "UserInput",
]
