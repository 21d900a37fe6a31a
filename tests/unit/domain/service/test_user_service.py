"""Unit tests for UserService."""

from datetime import timedelta

import pytest

from social.domain.error import (
    AuthenticationError,
    DuplicateEmailError,
    DuplicateUsernameError,
    NotFoundError,
)
from social.domain.repository import UserRepository
from social.domain.service import UserService, hash_invitation_token
from social.domain.value import UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_register_creates_inactive_user_with_hashed_token(self, unit_env):
        """The user starts inactive and only the token digest is stored."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        user, token = await user_service.register("alice", "alice@example.com", "secret123")

        # Assert
        assert user.is_active is False
        assert user.role.name == "user"
        assert user.password is None
        assert token not in user_repo.store.invitations
        assert hash_invitation_token(token) in user_repo.store.invitations

    @pytest.mark.asyncio
    async def test_duplicate_email_raises(self, unit_env):
        """Emails are unique regardless of case."""
        user_service = await unit_env.get(UserService)
        await user_service.register("alice", "alice@example.com", "secret123")

        with pytest.raises(DuplicateEmailError):
            await user_service.register("alice2", "ALICE@example.com", "secret123")

    @pytest.mark.asyncio
    async def test_duplicate_username_raises(self, unit_env):
        """Usernames are unique."""
        user_service = await unit_env.get(UserService)
        await user_service.register("alice", "alice@example.com", "secret123")

        with pytest.raises(DuplicateUsernameError):
            await user_service.register("alice", "other@example.com", "secret123")


class TestActivate:
    """Tests for activate method."""

    @pytest.mark.asyncio
    async def test_activate_marks_user_active_and_consumes_token(self, unit_env):
        """A token activates once."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user, token = await user_service.register("alice", "alice@example.com", "secret123")

        # Act
        activated = await user_service.activate(token)

        # Assert
        assert activated.id == user.id
        assert activated.is_active is True
        with pytest.raises(NotFoundError):
            await user_service.activate(token)

    @pytest.mark.asyncio
    async def test_unknown_token_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.activate("does-not-exist")

    @pytest.mark.asyncio
    async def test_expired_token_raises_not_found(self, unit_env):
        """Invitations stop working after their expiry."""
        user_repo = await unit_env.get(UserRepository)
        user_service = UserService(user_repo, invitation_expiry=timedelta(seconds=-1))
        _, token = await user_service.register("alice", "alice@example.com", "secret123")

        with pytest.raises(NotFoundError):
            await user_service.activate(token)


class TestAuthenticate:
    """Tests for authenticate method."""

    @pytest.mark.asyncio
    async def test_active_user_with_right_password_authenticates(self, unit_env):
        user_service = await unit_env.get(UserService)
        user, token = await user_service.register("alice", "alice@example.com", "secret123")
        await user_service.activate(token)

        result = await user_service.authenticate("alice@example.com", "secret123")

        assert result.id == user.id

    @pytest.mark.asyncio
    async def test_wrong_password_raises_authentication_error(self, unit_env):
        user_service = await unit_env.get(UserService)
        _, token = await user_service.register("alice", "alice@example.com", "secret123")
        await user_service.activate(token)

        with pytest.raises(AuthenticationError):
            await user_service.authenticate("alice@example.com", "wrong-password")

    @pytest.mark.asyncio
    async def test_inactive_user_cannot_authenticate(self, unit_env):
        """Users must activate before they can get a token."""
        user_service = await unit_env.get(UserService)
        await user_service.register("alice", "alice@example.com", "secret123")

        with pytest.raises(AuthenticationError):
            await user_service.authenticate("alice@example.com", "secret123")


class TestGetById:
    """Tests for get_by_id method."""

    @pytest.mark.asyncio
    async def test_missing_user_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(999))
