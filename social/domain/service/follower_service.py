"""Follow graph domain service."""

import logfire

from social.domain.model import Follower
from social.domain.repository import FollowerRepository
from social.domain.value import UserId

from .base import Service
from .user_service import UserService


class FollowerService(Service):
    """Follows and unfollows between users."""

    def __init__(
        self, follower_repository: FollowerRepository, user_service: UserService
    ) -> None:
        """Initialize follower service.

        Args:
            follower_repository: Follower repository
            user_service: Used to check the followed user exists
        """
        self.follower_repository = follower_repository
        self.user_service = user_service

    async def follow(self, follower_id: UserId, followed_id: UserId) -> Follower:
        """Make ``follower_id`` follow ``followed_id``.

        Raises:
            NotFoundError: If the followed user does not exist
            AlreadyFollowingError: If the edge already exists
        """
        with logfire.span(
            "follower_service.follow", follower_id=follower_id, followed_id=followed_id
        ):
            await self.user_service.get_by_id(followed_id)
            edge = await self.follower_repository.follow(follower_id, followed_id)
            logfire.info("User followed", follower_id=follower_id, followed_id=followed_id)
            return edge

    async def unfollow(self, follower_id: UserId, followed_id: UserId) -> None:
        """Remove the edge; unfollowing someone not followed is a no-op."""
        with logfire.span(
            "follower_service.unfollow",
            follower_id=follower_id,
            followed_id=followed_id,
        ):
            await self.follower_repository.unfollow(follower_id, followed_id)
            logfire.info(
                "User unfollowed", follower_id=follower_id, followed_id=followed_id
            )
