"""Test configuration and fixtures."""

import logfire
import pytest

from social.domain.model import Role, User
from social.domain.value import RoleId, RoleName, UserId, Username


@pytest.fixture(scope="session", autouse=True)
def configure_logfire():
    """Keep telemetry local and quiet during tests."""
    logfire.configure(send_to_logfire=False, console=False)


ROLE_LEVELS = {RoleName.USER: 1, RoleName.MODERATOR: 2, RoleName.ADMIN: 3}


def make_user(
    user_id: int = 1,
    username: str = "alice",
    role: RoleName = RoleName.USER,
    is_active: bool = True,
) -> User:
    """Build a user without touching any repository."""
    return User(
        id=UserId(user_id),
        username=Username(username),
        email=f"{username}@example.com",
        is_active=is_active,
        role=Role(
            id=RoleId(ROLE_LEVELS[role]),
            name=role.value,
            level=ROLE_LEVELS[role],
            description=f"{role.value} role",
        ),
    )
