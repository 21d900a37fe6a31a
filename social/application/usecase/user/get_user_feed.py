"""Get user feed use case."""

from datetime import datetime

from pydantic import BaseModel

from social.domain.model import FeedItem, User
from social.domain.service import PostService
from social.domain.value import FeedQuery


class GetUserFeedRequest(BaseModel):
    """Get user feed request."""

    viewer: User
    query: FeedQuery


class FeedItemResponse(BaseModel):
    """Feed entry: a post with its comment count and author."""

    id: int
    user_id: int
    title: str
    content: str
    tags: list[str]
    version: int
    created_at: datetime
    updated_at: datetime
    comment_count: int
    username: str

    @classmethod
    def from_item(cls, item: FeedItem) -> "FeedItemResponse":
        return cls(
            id=item.post.id,
            user_id=item.post.author_id,
            title=item.post.title,
            content=item.post.content,
            tags=item.post.tags,
            version=item.post.version,
            created_at=item.post.created_at,
            updated_at=item.post.updated_at,
            comment_count=item.comment_count,
            username=item.author_username,
        )


class GetUserFeedUseCase:
    """Use case for reading the viewer's feed."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetUserFeedRequest) -> list[FeedItemResponse]:
        """Fetch one page of the viewer's feed."""
        items = await self.post_service.get_user_feed(request.viewer.id, request.query)
        return [FeedItemResponse.from_item(item) for item in items]
