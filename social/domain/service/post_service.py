"""Post domain service."""

import logfire

from social.domain.error import NotFoundError, VersionConflictError
from social.domain.model import FeedItem, Post
from social.domain.repository import PostRepository
from social.domain.value import FeedQuery, PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self, author_id: UserId, title: str, content: str, tags: list[str]
    ) -> Post:
        """Create a post at version 1."""
        with logfire.span("post_service.create_post", author_id=author_id, title=title):
            post = await self.post_repository.create(
                author_id=author_id,
                title=title,
                content=content,
                tags=_normalize_tags(tags),
            )
            logfire.info("Post created", post_id=post.id, author_id=author_id)
            return post

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)

            if post is None:
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("Post", str(post_id))

            return post

    async def update_post(
        self,
        post: Post,
        title: str | None = None,
        content: str | None = None,
        tags: list[str] | None = None,
        version: int | None = None,
    ) -> Post:
        """Apply a partial update guarded by the post's version.

        Fields left as None keep their current value. The write only
        succeeds if the stored version still equals ``version`` (the loaded
        post's version when omitted).

        Args:
            post: Post as last read by the caller
            title: New title
            content: New content
            tags: New tag set
            version: Version the caller last saw

        Returns:
            The updated post carrying its new version

        Raises:
            VersionConflictError: If the post changed or disappeared since
        """
        expected_version = post.version if version is None else version

        with logfire.span(
            "post_service.update_post", post_id=post.id, version=expected_version
        ):
            changes: dict = {"version": expected_version}
            if title is not None:
                changes["title"] = title
            if content is not None:
                changes["content"] = content
            if tags is not None:
                changes["tags"] = _normalize_tags(tags)

            candidate = Post.model_validate({**post.model_dump(), **changes})

            try:
                updated = await self.post_repository.update(candidate)
            except VersionConflictError:
                logfire.warn(
                    "Post version conflict", post_id=post.id, version=expected_version
                )
                raise

            logfire.info("Post updated", post_id=post.id, version=updated.version)
            return updated

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.delete_post", post_id=post_id):
            deleted = await self.post_repository.delete(post_id)
            if not deleted:
                logfire.warn("Post to delete not found", post_id=post_id)
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post deleted", post_id=post_id)

    async def get_user_feed(self, user_id: UserId, query: FeedQuery) -> list[FeedItem]:
        """Get a user's feed page."""
        with logfire.span(
            "post_service.get_user_feed",
            user_id=user_id,
            limit=query.limit,
            offset=query.offset,
            sort=query.sort.value,
        ):
            items = await self.post_repository.get_user_feed(user_id, query)
            logfire.info("Feed fetched", user_id=user_id, count=len(items))
            return items


def _normalize_tags(tags: list[str]) -> list[str]:
    # Tags are a set; keep first occurrence order for stable output
    return list(dict.fromkeys(tag.strip() for tag in tags if tag.strip()))
