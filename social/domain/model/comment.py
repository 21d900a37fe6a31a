"""Comment entity."""

from datetime import datetime, timezone

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Flat comment on a post."""

    id: CommentId
    post_id: PostId
    author_id: UserId
    author_username: str
    content: str = Field(min_length=1, max_length=1000)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
