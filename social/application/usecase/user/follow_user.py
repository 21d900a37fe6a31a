"""Follow and unfollow use cases."""

from pydantic import BaseModel

from social.domain.model import User
from social.domain.service import FollowerService
from social.domain.value import UserId


class FollowUserRequest(BaseModel):
    """Follow or unfollow request."""

    follower: User
    followed_id: int


class FollowUserUseCase:
    """Use case for following another user."""

    def __init__(self, follower_service: FollowerService) -> None:
        self.follower_service = follower_service

    async def execute(self, request: FollowUserRequest) -> None:
        """Follow ``followed_id``.

        Raises:
            NotFoundError: If the followed user does not exist
            AlreadyFollowingError: If already following
        """
        await self.follower_service.follow(
            request.follower.id, UserId(request.followed_id)
        )


class UnfollowUserUseCase:
    """Use case for unfollowing a user."""

    def __init__(self, follower_service: FollowerService) -> None:
        self.follower_service = follower_service

    async def execute(self, request: FollowUserRequest) -> None:
        """Stop following ``followed_id``."""
        await self.follower_service.unfollow(
            request.follower.id, UserId(request.followed_id)
        )
