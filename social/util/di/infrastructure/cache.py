"""User cache infrastructure providers."""

from collections.abc import AsyncIterator
from datetime import timedelta

from dishka import Scope, provide
from redis.asyncio import Redis

from social.config import Settings
from social.domain.repository import UserCache
from social.persistence.repository import RedisUserCache
from social.util.di.base import ProviderBase
from social.util.observability import instrument_redis


class CacheProvider(ProviderBase):
    """Cache component base."""

    __mock_component__ = "cache"


class ProdCacheProvider(CacheProvider):
    """Production cache provider backed by Redis.

    The client connects lazily, so a disabled cache never opens a connection.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_redis(self, settings: Settings) -> AsyncIterator[Redis]:
        """Provide the shared Redis client."""
        if settings.redis.enabled:
            instrument_redis()
        client = Redis.from_url(
            settings.redis.url,
            socket_timeout=settings.redis.socket_timeout_seconds,
            decode_responses=True,
        )
        yield client
        await client.aclose()

    @provide(scope=Scope.APP)
    def get_user_cache(self, redis: Redis, settings: Settings) -> UserCache:
        """Provide the Redis user cache."""
        return RedisUserCache(redis, ttl=timedelta(hours=settings.redis.user_ttl_hours))
