"""In-memory store for user records."""

import logging

from userapi.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """Ordered, process-lifetime collection of users.

    Not thread-safe on its own; ``UserService`` serializes access to it.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self.users: list[User] = []

    def list_users(self) -> list[User]:
        """List all users in insertion order."""
        return list(self.users)

    def get_user(self, user_id: int) -> User | None:
        """Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            The stored user, or None if absent
        """
        return next((user for user in self.users if user.id == user_id), None)

    def next_id(self) -> int:
        """Return the id the next created user will receive."""
        return max((user.id for user in self.users), default=0) + 1

    def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        """Check whether an email is used by another user, ignoring case.

        Args:
            email: Email to look for
            exclude_id: ID of a user to leave out of the comparison

        Returns:
            True if some other user already has this email
        """
        wanted = email.lower()
        return any(user.email.lower() == wanted and user.id != exclude_id for user in self.users)

    def add_user(self, name: str, email: str) -> User:
        """Create a user with the next id and append it."""
        user = User(id=self.next_id(), name=name, email=email)
        self.users.append(user)
        logger.debug("Stored user %s", user.id)
        return user

    def update_user(self, user: User, name: str, email: str) -> User:
        """Replace name and email of a stored user in place."""
        user.name = name
        user.email = email
        return user

    def delete_user(self, user: User) -> None:
        """Remove a stored user."""
        self.users.remove(user)
