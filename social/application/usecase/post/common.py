"""Post response shared by post use cases."""

from datetime import datetime

from pydantic import BaseModel

from social.domain.model import Post


class PostResponse(BaseModel):
    """Post as exposed over the API."""

    id: int
    user_id: int
    title: str
    content: str
    tags: list[str]
    version: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            user_id=post.author_id,
            title=post.title,
            content=post.content,
            tags=post.tags,
            version=post.version,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
