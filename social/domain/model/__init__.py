"""Domain models for the social API."""

from social.domain.model.comment import Comment
from social.domain.model.follower import Follower
from social.domain.model.post import FeedItem, Post
from social.domain.model.role import Role
from social.domain.model.user import User

__all__ = [
    "Comment",
    "FeedItem",
    "Follower",
    "Post",
    "Role",
    "User",
]
