"""Read-through cache in front of user lookups."""

import logfire

from social.domain.model import User
from social.domain.repository import UserCache
from social.domain.value import UserId

from .base import Service
from .user_service import UserService


class UserCacheService(Service):
    """Resolves users through the cache, falling back to the database.

    Entries are written lazily on a miss and only expire through their TTL;
    user mutations do not invalidate them.
    """

    def __init__(
        self, user_service: UserService, user_cache: UserCache, enabled: bool
    ) -> None:
        """Initialize the cache service.

        Args:
            user_service: Durable user lookups
            user_cache: Cache store
            enabled: When False every lookup goes to the database
        """
        self.user_service = user_service
        self.user_cache = user_cache
        self.enabled = enabled

    async def resolve(self, user_id: UserId) -> User:
        """Get a user, preferring the cached snapshot.

        Args:
            user_id: User ID

        Returns:
            The user

        Raises:
            NotFoundError: If the user does not exist
            Exception: Cache read or write failures propagate unchanged
        """
        if not self.enabled:
            return await self.user_service.get_by_id(user_id)

        with logfire.span("user_cache_service.resolve", user_id=user_id):
            cached = await self.user_cache.get(user_id)
            if cached is not None:
                logfire.debug("User cache hit", user_id=user_id)
                return cached

            logfire.debug("User cache miss", user_id=user_id)
            user = await self.user_service.get_by_id(user_id)

            try:
                await self.user_cache.set(user)
            except Exception as e:
                logfire.error(
                    "User cache write failed", user_id=user_id, error=str(e)
                )
                raise

            return user
