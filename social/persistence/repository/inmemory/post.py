"""In-memory post repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from social.domain.error import VersionConflictError
from social.domain.model import FeedItem, Post
from social.domain.repository.post import PostRepository
from social.domain.value import FeedQuery, PostId, SortDirection, UserId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def create(
        self, author_id: UserId, title: str, content: str, tags: list[str]
    ) -> Post:
        """Insert a post at version 1."""
        post = Post(
            id=self.store.next_post_id(),
            author_id=author_id,
            title=title,
            content=content,
            tags=list(tags),
        )
        self.store.posts[post.id] = post
        return post

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self.store.posts.get(post_id)

    async def update(self, post: Post) -> Post:
        """Replace the post if the stored version matches."""
        current = self.store.posts.get(post.id)
        if current is None or current.version != post.version:
            raise VersionConflictError(post.id, post.version)

        updated = post.model_copy(
            update={
                "version": current.version + 1,
                "updated_at": datetime.now(timezone.utc),
            }
        )
        self.store.posts[post.id] = updated
        return updated

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post and its comments."""
        if self.store.posts.pop(post_id, None) is None:
            return False

        for comment_id in [
            c.id for c in self.store.comments.values() if c.post_id == post_id
        ]:
            del self.store.comments[comment_id]
        return True

    async def get_user_feed(self, user_id: UserId, query: FeedQuery) -> list[FeedItem]:
        """Own and followed posts, filtered, sorted and paged."""
        followed = {
            followed_id
            for followed_id, follower_id in self.store.followers
            if follower_id == user_id
        }
        search = query.search.lower()
        tags = set(query.tags)

        posts = [
            p
            for p in self.store.posts.values()
            if (p.author_id == user_id or p.author_id in followed)
            and (
                not search
                or search in p.title.lower()
                or search in p.content.lower()
            )
            and (not tags or tags.intersection(p.tags))
            and (query.since is None or p.created_at >= query.since)
            and (query.until is None or p.created_at <= query.until)
        ]

        posts.sort(
            key=lambda p: (p.created_at, p.id),
            reverse=query.sort == SortDirection.DESC,
        )
        page = posts[query.offset : query.offset + query.limit]

        return [
            FeedItem(
                post=p,
                comment_count=sum(
                    1 for c in self.store.comments.values() if c.post_id == p.id
                ),
                author_username=self._username(p.author_id),
            )
            for p in page
        ]

    def _username(self, user_id: UserId) -> str:
        user = self.store.users.get(user_id)
        return user.username.root if user else ""
