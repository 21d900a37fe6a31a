"""User aggregate root."""

from datetime import datetime, timezone

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.model.role import Role
from social.domain.value import Password, UserId, Username


class User(DomainModel):
    """Registered user.

    Users are created inactive and become active once their invitation
    token is redeemed. The password is excluded from every serialization,
    including cached snapshots.
    """

    id: UserId
    username: Username
    email: str = Field(min_length=3, max_length=255)
    password: Password | None = Field(default=None, exclude=True, repr=False)
    is_active: bool = False
    role: Role
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
