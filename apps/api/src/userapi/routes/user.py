"""User API routes."""

from fastapi import APIRouter, Depends, Response, status
from userapi.config import Settings
from userapi.models.user import User, UserInput
from userapi.responses import to_response
from userapi.services import get_app_settings, get_user_service
from userapi.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "User not found"}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"description": "Validation failed"}}
_PROBLEM = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Unexpected error"}}


@router.get("", response_model=list[User])
async def list_users(service: UserService = Depends(get_user_service)) -> Response:
    """Retrieve all users."""
    return to_response(service.list_users())


@router.get("/{user_id}", response_model=User, responses=_NOT_FOUND)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> Response:
    """Retrieve a user by ID."""
    return to_response(service.get_user(user_id))


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    responses={**_BAD_REQUEST, **_PROBLEM},
)
async def add_user(
    user: UserInput,
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Create a user. Requires a non-empty name and a unique email."""
    result = service.create_user(user)
    headers = {"Location": f"/users/{result.value.id}"} if result.ok else None
    return to_response(
        result,
        status_code=status.HTTP_201_CREATED,
        headers=headers,
        expose_detail=settings.expose_error_detail,
    )


@router.put("/{user_id}", response_model=User, responses={**_NOT_FOUND, **_BAD_REQUEST, **_PROBLEM})
async def update_user(
    user_id: int,
    user: UserInput,
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Update a user's name and email. The email must stay unique."""
    return to_response(service.update_user(user_id, user), expose_detail=settings.expose_error_detail)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, responses={**_NOT_FOUND, **_PROBLEM})
async def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Delete a user by ID."""
    return to_response(
        service.delete_user(user_id),
        status_code=status.HTTP_204_NO_CONTENT,
        expose_detail=settings.expose_error_detail,
    )
