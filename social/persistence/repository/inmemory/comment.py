"""In-memory comment repository for testing."""

from typing import Optional

from social.domain.model import Comment
from social.domain.repository.comment import CommentRepository
from social.domain.value import CommentId, PostId, UserId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def create(self, post_id: PostId, author_id: UserId, content: str) -> Comment:
        """Insert a comment."""
        author = self.store.users.get(author_id)
        comment = Comment(
            id=self.store.next_comment_id(),
            post_id=post_id,
            author_id=author_id,
            author_username=author.username.root if author else "",
            content=content,
        )
        self.store.comments[comment.id] = comment
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self.store.comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Comments on a post, newest first."""
        comments = [c for c in self.store.comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: (c.created_at, c.id), reverse=True)
        return comments

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content."""
        comment = self.store.comments.get(comment_id)
        if comment is None:
            return None

        updated = comment.model_copy(update={"content": content})
        self.store.comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self.store.comments.pop(comment_id, None) is not None
