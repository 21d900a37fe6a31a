"""In-memory user cache for testing."""

import time
from collections.abc import Callable
from datetime import timedelta
from typing import Optional

from social.domain.model import User
from social.domain.repository.cache import UserCache, user_cache_key
from social.domain.value import UserId


class InMemoryUserCache(UserCache):
    """Dict-backed cache storing the same JSON snapshots as Redis.

    Set ``fail_writes`` to simulate an unavailable cache on ``set``.
    """

    def __init__(
        self,
        ttl: timedelta = timedelta(hours=48),
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, tuple[float, str]] = {}
        self.fail_writes = False

    async def get(self, user_id: UserId) -> Optional[User]:
        """Return the cached user unless absent or expired."""
        entry = self._entries.get(user_cache_key(user_id))
        if entry is None:
            return None

        expires_at, data = entry
        if self._clock() >= expires_at:
            del self._entries[user_cache_key(user_id)]
            return None

        return User.model_validate_json(data)

    async def set(self, user: User) -> None:
        """Store the snapshot with the configured TTL."""
        if self.fail_writes:
            raise ConnectionError("user cache unavailable")

        self._entries[user_cache_key(user.id)] = (
            self._clock() + self.ttl.total_seconds(),
            user.model_dump_json(),
        )

    def __contains__(self, user_id: UserId) -> bool:
        return user_cache_key(user_id) in self._entries
