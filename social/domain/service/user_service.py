"""User domain service."""

import hashlib
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from social.domain.error import AuthenticationError, NotFoundError
from social.domain.model import User
from social.domain.repository import UserRepository
from social.domain.value import Password, RoleName, UserId, Username

from .base import Service


def hash_invitation_token(plain_token: str) -> str:
    """Digest stored in place of an invitation token."""
    return hashlib.sha256(plain_token.encode("utf-8")).hexdigest()


class UserService(Service):
    """Domain service for registration, activation and user lookups."""

    def __init__(
        self, user_repository: UserRepository, invitation_expiry: timedelta
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            invitation_expiry: How long an invitation token stays redeemable
        """
        self.user_repository = user_repository
        self.invitation_expiry = invitation_expiry

    async def register(
        self, username: str, email: str, password: str
    ) -> tuple[User, str]:
        """Create an inactive user together with its invitation.

        Only the sha256 digest of the invitation token is stored; the plain
        token is returned so it can be mailed to the user.

        Args:
            username: Requested username
            email: Email address
            password: Plaintext password

        Returns:
            The created user and the plain invitation token

        Raises:
            HashingError: If the password cannot be hashed
            DuplicateEmailError: If the email is already registered
            DuplicateUsernameError: If the username is already taken
        """
        with logfire.span("user_service.register", username=username):
            hashed = Password()
            hashed.set(password)

            plain_token = str(uuid4())
            expires_at = datetime.now(timezone.utc) + self.invitation_expiry

            user = await self.user_repository.create_and_invite(
                username=Username(username),
                email=email,
                password=hashed,
                role_name=RoleName.USER.value,
                token_hash=hash_invitation_token(plain_token),
                expires_at=expires_at,
            )

            logfire.info("User registered", user_id=user.id, username=username)
            return user, plain_token

    async def activate(self, plain_token: str) -> User:
        """Activate the user an invitation token belongs to.

        Args:
            plain_token: Token from the activation link

        Returns:
            The activated user

        Raises:
            NotFoundError: If the token is unknown or expired
        """
        with logfire.span("user_service.activate"):
            user = await self.user_repository.activate(
                hash_invitation_token(plain_token), datetime.now(timezone.utc)
            )
            if user is None:
                logfire.warn("Invitation not found or expired")
                raise NotFoundError("Invitation", "token")

            logfire.info("User activated", user_id=user.id)
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", str(user_id))
            return user

    async def authenticate(self, email: str, password: str) -> User:
        """Check credentials of an active user.

        Args:
            email: Email address
            password: Plaintext password

        Returns:
            The authenticated user

        Raises:
            AuthenticationError: If no active user has this email or the
                password does not match
        """
        with logfire.span("user_service.authenticate"):
            user = await self.user_repository.find_active_by_email(email)
            if user is None:
                logfire.warn("Login for unknown or inactive email")
                raise AuthenticationError("unknown email")

            if user.password is None or not user.password.verify(password):
                logfire.warn("Login with invalid password", user_id=user.id)
                raise AuthenticationError("invalid password")

            return user

    async def delete(self, user_id: UserId) -> None:
        """Delete a user and its pending invitations."""
        with logfire.span("user_service.delete", user_id=user_id):
            await self.user_repository.delete(user_id)
            logfire.info("User deleted", user_id=user_id)
