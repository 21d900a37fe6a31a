"""Post aggregate root."""

from datetime import datetime, timezone

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import PostId, UserId


class Post(DomainModel):
    """Post authored by a user.

    ``version`` starts at 1 and grows by exactly one with every successful
    update; updates carrying a stale version are rejected.
    """

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1, max_length=1000)
    tags: list[str] = Field(default_factory=list)
    version: int = Field(default=1, ge=1)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class FeedItem(DomainModel):
    """Post as it appears in a feed."""

    post: Post
    comment_count: int = Field(default=0, ge=0)
    author_username: str
