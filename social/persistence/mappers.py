"""Mappers for converting between database rows and domain models.

Rows come from SQLAlchemy Core queries as mappings; domain models are
immutable Pydantic models, so the mapping is done by hand.
"""

from typing import Any, Mapping

from social.domain.model import Comment, FeedItem, Post, Role, User
from social.domain.value import CommentId, Password, PostId, RoleId, UserId, Username


def row_to_role(row: Mapping[str, Any]) -> Role:
    """Convert a roles row to a Role."""
    return Role(
        id=RoleId(row["id"]),
        name=row["name"],
        level=row["level"],
        description=row["description"],
    )


def row_to_user(row: Mapping[str, Any], include_password: bool = False) -> User:
    """Convert a users row joined with its role to a User.

    The role columns are expected as ``role_id``, ``role_name``,
    ``role_level`` and ``role_description``.

    Args:
        row: Database row as mapping
        include_password: Whether to attach the stored password hash

    Returns:
        User domain model
    """
    password = None
    if include_password and row.get("password") is not None:
        password = Password(bytes(row["password"]))

    return User(
        id=UserId(row["id"]),
        username=Username(row["username"]),
        email=row["email"],
        password=password,
        is_active=row["is_active"],
        role=Role(
            id=RoleId(row["role_id"]),
            name=row["role_name"],
            level=row["role_level"],
            description=row["role_description"],
        ),
        created_at=row["created_at"],
    )


def row_to_post(row: Mapping[str, Any]) -> Post:
    """Convert a posts row to a Post."""
    return Post(
        id=PostId(row["id"]),
        author_id=UserId(row["user_id"]),
        title=row["title"],
        content=row["content"],
        tags=list(row["tags"] or []),
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_feed_item(row: Mapping[str, Any]) -> FeedItem:
    """Convert a feed query row to a FeedItem."""
    return FeedItem(
        post=row_to_post(row),
        comment_count=row["comment_count"],
        author_username=row["author_username"],
    )


def row_to_comment(row: Mapping[str, Any]) -> Comment:
    """Convert a comments row joined with its author to a Comment."""
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        author_id=UserId(row["user_id"]),
        author_username=row["author_username"],
        content=row["content"],
        created_at=row["created_at"],
    )
