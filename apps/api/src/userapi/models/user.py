"""User models for the User API."""

from typing import ClassVar

from pydantic import BaseModel, Field


class User(BaseModel):
    """User entity model."""

    id: int = Field(..., description="Store-assigned identifier for the user")
    name: str = Field(..., description="Full name of the user")
    email: str = Field(..., description="Email address of the user")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "id": 1,
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
            }
        }


class UserInput(BaseModel):
    """Request body for creating or updating a user.

    Fields are optional here so that missing values reach the service
    validation and come back with its messages. An ``id`` in the body is ignored.
    """

    name: str | None = Field(None, description="Full name of the user")
    email: str | None = Field(None, description="Email address of the user")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
            }
        }
