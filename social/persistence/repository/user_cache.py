"""Redis implementation of the user cache."""

from datetime import timedelta
from typing import Optional

import logfire
from redis.asyncio import Redis

from social.domain.model import User
from social.domain.repository.cache import UserCache, user_cache_key
from social.domain.value import UserId


class RedisUserCache(UserCache):
    """Stores JSON user snapshots under ``user-{id}`` with a TTL."""

    def __init__(self, redis: Redis, ttl: timedelta) -> None:
        """Initialize the cache.

        Args:
            redis: Shared Redis client
            ttl: Lifetime of each entry
        """
        self.redis = redis
        self.ttl = ttl

    async def get(self, user_id: UserId) -> Optional[User]:
        """Return the cached user, or None on a miss."""
        data = await self.redis.get(user_cache_key(user_id))
        if data is None:
            return None

        return User.model_validate_json(data)

    async def set(self, user: User) -> None:
        """Store the user snapshot; the password is never serialized."""
        await self.redis.set(
            user_cache_key(user.id),
            user.model_dump_json(),
            ex=int(self.ttl.total_seconds()),
        )
        logfire.debug("User cached", user_id=user.id, ttl_seconds=self.ttl.total_seconds())
