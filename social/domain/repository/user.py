"""User repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from social.domain.model import User
from social.domain.value import Password, UserId, Username


class UserRepository(ABC):
    """Repository for the User aggregate and its invitations."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active_by_email(self, email: str) -> Optional[User]:
        """Find an activated user by email, including the password hash.

        Args:
            email: Email address

        Returns:
            The active user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create_and_invite(
        self,
        username: Username,
        email: str,
        password: Password,
        role_name: str,
        token_hash: str,
        expires_at: datetime,
    ) -> User:
        """Create an inactive user and its invitation atomically.

        Args:
            username: Unique username
            email: Unique email address
            password: Hashed password
            role_name: Name of the role assigned to the user
            token_hash: Hex sha256 digest of the invitation token
            expires_at: When the invitation stops being redeemable

        Returns:
            The created user

        Raises:
            DuplicateEmailError: If the email is already registered
            DuplicateUsernameError: If the username is already taken
        """
        pass

    @abstractmethod
    async def activate(self, token_hash: str, now: datetime) -> Optional[User]:
        """Activate the user owning an unexpired invitation.

        Marks the user active and deletes its invitations atomically.

        Args:
            token_hash: Hex sha256 digest of the invitation token
            now: Reference time for the expiry check

        Returns:
            The activated user, or None if no unexpired invitation matches
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user and its invitations atomically.

        Args:
            user_id: The user ID to delete
        """
        pass
