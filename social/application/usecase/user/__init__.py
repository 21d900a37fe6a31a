"""User use cases."""

from .activate_user import ActivateUserRequest, ActivateUserUseCase
from .common import RoleResponse, UserResponse
from .follow_user import FollowUserRequest, FollowUserUseCase, UnfollowUserUseCase
from .get_user import GetUserRequest, GetUserUseCase
from .get_user_feed import FeedItemResponse, GetUserFeedRequest, GetUserFeedUseCase

__all__ = [
    "ActivateUserRequest",
    "ActivateUserUseCase",
    "FeedItemResponse",
    "FollowUserRequest",
    "FollowUserUseCase",
    "GetUserFeedRequest",
    "GetUserFeedUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "RoleResponse",
    "UnfollowUserUseCase",
    "UserResponse",
]
