"""User cache interface."""

from abc import ABC, abstractmethod
from typing import Optional

from social.domain.model import User
from social.domain.value import UserId


def user_cache_key(user_id: UserId) -> str:
    """Cache key under which a user snapshot is stored."""
    return f"user-{user_id}"


class UserCache(ABC):
    """Fast-access store of user snapshots with a fixed time-to-live.

    A missing entry is a normal outcome (``None``); errors are reserved for
    failures of the store itself.
    """

    @abstractmethod
    async def get(self, user_id: UserId) -> Optional[User]:
        """Return the cached user, or None on a miss."""
        pass

    @abstractmethod
    async def set(self, user: User) -> None:
        """Store a user snapshot with the configured TTL."""
        pass
