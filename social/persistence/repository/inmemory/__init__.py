"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .follower import InMemoryFollowerRepository
from .post import InMemoryPostRepository
from .role import InMemoryRoleRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository
from .user_cache import InMemoryUserCache

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryFollowerRepository",
    "InMemoryPostRepository",
    "InMemoryRoleRepository",
    "InMemoryStore",
    "InMemoryUserCache",
    "InMemoryUserRepository",
]
