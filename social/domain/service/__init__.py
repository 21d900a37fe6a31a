"""Domain services for the social API."""

from .authorization_service import AuthorizationService
from .comment_service import CommentService
from .follower_service import FollowerService
from .jwt_service import JWTService
from .post_service import PostService
from .user_cache_service import UserCacheService
from .user_service import UserService, hash_invitation_token

__all__ = [
    "AuthorizationService",
    "CommentService",
    "FollowerService",
    "JWTService",
    "PostService",
    "UserCacheService",
    "UserService",
    "hash_invitation_token",
]
