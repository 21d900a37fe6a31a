"""PostgreSQL and Redis repository implementations."""

from social.persistence.repository.comment import PostgresCommentRepository
from social.persistence.repository.follower import PostgresFollowerRepository
from social.persistence.repository.post import PostgresPostRepository
from social.persistence.repository.role import PostgresRoleRepository
from social.persistence.repository.user import PostgresUserRepository
from social.persistence.repository.user_cache import RedisUserCache

__all__ = [
    "PostgresCommentRepository",
    "PostgresFollowerRepository",
    "PostgresPostRepository",
    "PostgresRoleRepository",
    "PostgresUserRepository",
    "RedisUserCache",
]
