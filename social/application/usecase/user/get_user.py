"""Get user use case."""

from pydantic import BaseModel

from social.domain.service import UserCacheService
from social.domain.value import UserId

from .common import UserResponse


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: int


class GetUserUseCase:
    """Use case for reading a user profile through the cache."""

    def __init__(self, user_cache_service: UserCacheService) -> None:
        self.user_cache_service = user_cache_service

    async def execute(self, request: GetUserRequest) -> UserResponse:
        """Resolve the user.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_cache_service.resolve(UserId(request.user_id))
        return UserResponse.from_user(user)
