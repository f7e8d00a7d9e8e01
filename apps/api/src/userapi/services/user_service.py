"""User service: validation and CRUD over the in-memory store."""

import logging
import threading

from userapi.models.user import User, UserInput
from userapi.services.results import ServiceResult
from userapi.services.user_store import UserStore

logger = logging.getLogger(__name__)

NAME_REQUIRED = "Name is required."
EMAIL_INVALID = "A valid email is required."
EMAIL_EXISTS = "Email already exists."


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class UserService:
    """Service for managing users in memory.

    Every operation runs under one lock, so validation and the mutation that
    follows it see the same store contents. The routes are ``async def`` and
    call in from the event loop; the lock matters for callers on other threads.
    Records handed out are copies taken under the lock.
    """

    def __init__(self, store: UserStore | None = None) -> None:
        """Initialize the service.

        Args:
            store: Backing store; a fresh empty one when omitted
        """
        self.store = store if store is not None else UserStore()
        self._lock = threading.Lock()

    def list_users(self) -> ServiceResult[list[User]]:
        with self._lock:
            return ServiceResult.success([user.model_copy() for user in self.store.list_users()])

    def get_user(self, user_id: int) -> ServiceResult[User]:
        with self._lock:
            user = self.store.get_user(user_id)
            if user is None:
                return ServiceResult.not_found()
            return ServiceResult.success(user.model_copy())

    def create_user(self, data: UserInput) -> ServiceResult[User]:
        """Validate and add a user.

        Args:
            data: Name and email of the new user

        Returns:
            Result carrying the created user, a validation error, or a problem
        """
        try:
            with self._lock:
                error = self._validate(data)
                if error is not None:
                    return ServiceResult.invalid(error)
                if self.store.email_taken(data.email):
                    return ServiceResult.invalid(EMAIL_EXISTS)
                user = self.store.add_user(data.name, data.email).model_copy()
            logger.info("Created user %s", user.id)
            return ServiceResult.success(user)
        except Exception as e:
            logger.error("Error creating user: %s", e, exc_info=True)
            return ServiceResult.problem(str(e))

    def update_user(self, user_id: int, data: UserInput) -> ServiceResult[User]:
        """Validate and apply new name and email to an existing user.

        Args:
            user_id: ID of the user to update
            data: Replacement name and email

        Returns:
            Result carrying the updated user, not-found, a validation error, or a problem
        """
        try:
            with self._lock:
                user = self.store.get_user(user_id)
                if user is None:
                    return ServiceResult.not_found()
                error = self._validate(data)
                if error is not None:
                    return ServiceResult.invalid(error)
                if self.store.email_taken(data.email, exclude_id=user_id):
                    return ServiceResult.invalid(EMAIL_EXISTS)
                user = self.store.update_user(user, data.name, data.email).model_copy()
            logger.info("Updated user %s", user_id)
            return ServiceResult.success(user)
        except Exception as e:
            logger.error("Error updating user %s: %s", user_id, e, exc_info=True)
            return ServiceResult.problem(str(e))

    def delete_user(self, user_id: int) -> ServiceResult[None]:
        try:
            with self._lock:
                user = self.store.get_user(user_id)
                if user is None:
                    return ServiceResult.not_found()
                self.store.delete_user(user)
            logger.info("Deleted user %s", user_id)
            return ServiceResult.success()
        except Exception as e:
            logger.error("Error deleting user %s: %s", user_id, e, exc_info=True)
            return ServiceResult.problem(str(e))

    @staticmethod
    def _validate(data: UserInput) -> str | None:
        if _is_blank(data.name):
            return NAME_REQUIRED
        if _is_blank(data.email) or "@" not in data.email:
            return EMAIL_INVALID
        return None
