"""Mock cache providers for testing."""

from dishka import Scope, provide

from social.domain.repository import UserCache
from social.persistence.repository.inmemory import InMemoryUserCache
from social.util.di.infrastructure.cache import CacheProvider


class MockCacheProvider(CacheProvider):
    """Mock cache provider using an in-memory user cache."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_cache(self) -> UserCache:
        """Provide in-memory user cache."""
        return InMemoryUserCache()
