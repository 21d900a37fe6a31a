"""Shared state for the in-memory repositories."""

from dataclasses import dataclass, field
from datetime import datetime
from itertools import count
from typing import Iterator

from social.domain.model import Comment, Follower, Post, Role, User
from social.domain.value import CommentId, PostId, RoleId, RoleName, UserId


def _default_roles() -> dict[str, Role]:
    return {
        RoleName.USER.value: Role(
            id=RoleId(1),
            name=RoleName.USER.value,
            level=1,
            description="A user can create posts and comments",
        ),
        RoleName.MODERATOR.value: Role(
            id=RoleId(2),
            name=RoleName.MODERATOR.value,
            level=2,
            description="A moderator can update other users posts",
        ),
        RoleName.ADMIN.value: Role(
            id=RoleId(3),
            name=RoleName.ADMIN.value,
            level=3,
            description="An admin can update and delete other users posts",
        ),
    }


@dataclass
class Invitation:
    """Pending invitation held by the in-memory user repository."""

    user_id: UserId
    expiry: datetime


@dataclass
class InMemoryStore:
    """Tables shared by the in-memory repositories.

    One store plays the role of the database: repositories created for
    different requests see each other's writes when they share a store.
    """

    roles: dict[str, Role] = field(default_factory=_default_roles)
    users: dict[UserId, User] = field(default_factory=dict)
    invitations: dict[str, Invitation] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    # Keyed by (followed user, follower)
    followers: dict[tuple[UserId, UserId], Follower] = field(default_factory=dict)

    _user_ids: Iterator[int] = field(default_factory=lambda: count(1), repr=False)
    _post_ids: Iterator[int] = field(default_factory=lambda: count(1), repr=False)
    _comment_ids: Iterator[int] = field(default_factory=lambda: count(1), repr=False)

    def next_user_id(self) -> UserId:
        return UserId(next(self._user_ids))

    def next_post_id(self) -> PostId:
        return PostId(next(self._post_ids))

    def next_comment_id(self) -> CommentId:
        return CommentId(next(self._comment_ids))
