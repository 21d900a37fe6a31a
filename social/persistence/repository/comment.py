"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

import logfire
from sqlalchemy import Select, delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.model import Comment
from social.domain.repository.comment import CommentRepository
from social.domain.value import CommentId, PostId, UserId
from social.persistence.mappers import row_to_comment
from social.persistence.tables import comments_table, users_table


def _select_comments() -> Select:
    """Comments joined with their author's username."""
    return select(
        comments_table, users_table.c.username.label("author_username")
    ).select_from(
        comments_table.join(users_table, users_table.c.id == comments_table.c.user_id)
    )


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, post_id: PostId, author_id: UserId, content: str) -> Comment:
        """Insert a comment and read it back with its author."""
        with logfire.span("comment_repository.create", post_id=post_id):
            result = await self.session.execute(
                insert(comments_table)
                .values(post_id=post_id, user_id=author_id, content=content)
                .returning(comments_table.c.id)
            )
            comment_id = CommentId(result.scalar_one())

            comment = await self.find_by_id(comment_id)
            assert comment is not None
            return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        with logfire.span("comment_repository.find_by_id", comment_id=comment_id):
            result = await self.session.execute(
                _select_comments().where(comments_table.c.id == comment_id)
            )
            row = result.fetchone()
            return row_to_comment(row._mapping) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Comments on a post, newest first."""
        with logfire.span("comment_repository.find_by_post", post_id=post_id):
            result = await self.session.execute(
                _select_comments()
                .where(comments_table.c.post_id == post_id)
                .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            )
            return [row_to_comment(row._mapping) for row in result.fetchall()]

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content."""
        with logfire.span("comment_repository.update_content", comment_id=comment_id):
            result = await self.session.execute(
                update(comments_table)
                .where(comments_table.c.id == comment_id)
                .values(content=content)
                .returning(comments_table.c.id)
            )
            if result.fetchone() is None:
                return None
            return await self.find_by_id(comment_id)

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        with logfire.span("comment_repository.delete", comment_id=comment_id):
            result = await self.session.execute(
                delete(comments_table)
                .where(comments_table.c.id == comment_id)
                .returning(comments_table.c.id)
            )
            return result.fetchone() is not None
