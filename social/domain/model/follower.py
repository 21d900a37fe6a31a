"""Follower edge."""

from datetime import datetime, timezone

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import UserId


class Follower(DomainModel):
    """``follower_id`` follows ``user_id``."""

    user_id: UserId
    follower_id: UserId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
