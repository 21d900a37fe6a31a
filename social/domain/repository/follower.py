"""Follower repository interface."""

from abc import ABC, abstractmethod

from social.domain.model import Follower
from social.domain.value import UserId


class FollowerRepository(ABC):
    """Repository for the follow graph."""

    @abstractmethod
    async def follow(self, follower_id: UserId, followed_id: UserId) -> Follower:
        """Record that ``follower_id`` follows ``followed_id``.

        Raises:
            AlreadyFollowingError: If the edge already exists
        """
        pass

    @abstractmethod
    async def unfollow(self, follower_id: UserId, followed_id: UserId) -> None:
        """Remove the edge if present."""
        pass
