"""Repository interfaces for the social domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from social.domain.repository.cache import UserCache
from social.domain.repository.comment import CommentRepository
from social.domain.repository.follower import FollowerRepository
from social.domain.repository.post import PostRepository
from social.domain.repository.role import RoleRepository
from social.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "FollowerRepository",
    "PostRepository",
    "RoleRepository",
    "UserCache",
    "UserRepository",
]
