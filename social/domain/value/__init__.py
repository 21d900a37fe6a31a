"""Domain value objects for the social API."""

from social.domain.value.feed import FeedQuery
from social.domain.value.identifiers import CommentId, PostId, RoleId, UserId
from social.domain.value.password import Password
from social.domain.value.types import RoleName, SortDirection, Username

__all__ = [
    # Identifiers
    "UserId",
    "RoleId",
    "PostId",
    "CommentId",
    # Types
    "FeedQuery",
    "Password",
    "RoleName",
    "SortDirection",
    "Username",
]
