"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import asc, delete, desc, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.error import VersionConflictError
from social.domain.model import FeedItem, Post
from social.domain.repository.post import PostRepository
from social.domain.value import FeedQuery, PostId, SortDirection, UserId
from social.persistence.mappers import row_to_feed_item, row_to_post
from social.persistence.tables import (
    comments_table,
    followers_table,
    posts_table,
    users_table,
)


def _like_pattern(search: str) -> str:
    """Substring pattern with LIKE wildcards in ``search`` escaped."""
    escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(
        self, author_id: UserId, title: str, content: str, tags: list[str]
    ) -> Post:
        """Insert a post; ID, version and timestamps come from the database."""
        with logfire.span("post_repository.create", author_id=author_id):
            stmt = (
                insert(posts_table)
                .values(user_id=author_id, title=title, content=content, tags=tags)
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            return row_to_post(result.one()._mapping)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=post_id):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=post_id)
                return None

            return row_to_post(row._mapping)

    async def update(self, post: Post) -> Post:
        """Version-conditioned update; bumps the version by one."""
        with logfire.span(
            "post_repository.update", post_id=post.id, version=post.version
        ):
            stmt = (
                update(posts_table)
                .where(
                    posts_table.c.id == post.id,
                    posts_table.c.version == post.version,
                )
                .values(
                    title=post.title,
                    content=post.content,
                    tags=post.tags,
                    version=posts_table.c.version + 1,
                    updated_at=func.now(),
                )
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                raise VersionConflictError(post.id, post.version)

            return row_to_post(row._mapping)

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post; comments go with it through the foreign key."""
        with logfire.span("post_repository.delete", post_id=post_id):
            stmt = (
                delete(posts_table)
                .where(posts_table.c.id == post_id)
                .returning(posts_table.c.id)
            )
            result = await self.session.execute(stmt)
            return result.fetchone() is not None

    async def get_user_feed(self, user_id: UserId, query: FeedQuery) -> List[FeedItem]:
        """Own and followed posts with comment counts, filtered and paged."""
        with logfire.span(
            "post_repository.get_user_feed",
            user_id=user_id,
            limit=query.limit,
            offset=query.offset,
            sort=query.sort.value,
            tags=query.tags,
            search=query.search,
        ):
            comment_counts = (
                select(
                    comments_table.c.post_id,
                    func.count(comments_table.c.id).label("comment_count"),
                )
                .group_by(comments_table.c.post_id)
                .subquery("comment_counts")
            )
            followed_ids = select(followers_table.c.user_id).where(
                followers_table.c.follower_id == user_id
            )

            stmt = (
                select(
                    posts_table,
                    users_table.c.username.label("author_username"),
                    func.coalesce(comment_counts.c.comment_count, 0).label(
                        "comment_count"
                    ),
                )
                .select_from(
                    posts_table.join(
                        users_table, users_table.c.id == posts_table.c.user_id
                    ).outerjoin(
                        comment_counts,
                        comment_counts.c.post_id == posts_table.c.id,
                    )
                )
                .where(
                    or_(
                        posts_table.c.user_id == user_id,
                        posts_table.c.user_id.in_(followed_ids),
                    )
                )
            )

            if query.search:
                pattern = _like_pattern(query.search)
                stmt = stmt.where(
                    or_(
                        posts_table.c.title.ilike(pattern, escape="\\"),
                        posts_table.c.content.ilike(pattern, escape="\\"),
                    )
                )

            if query.tags:
                stmt = stmt.where(posts_table.c.tags.overlap(query.tags))

            if query.since is not None:
                stmt = stmt.where(posts_table.c.created_at >= query.since)
            if query.until is not None:
                stmt = stmt.where(posts_table.c.created_at <= query.until)

            # id breaks ties between posts created in the same instant
            direction = asc if query.sort == SortDirection.ASC else desc
            stmt = (
                stmt.order_by(
                    direction(posts_table.c.created_at), direction(posts_table.c.id)
                )
                .limit(query.limit)
                .offset(query.offset)
            )

            result = await self.session.execute(stmt)
            return [row_to_feed_item(row._mapping) for row in result.fetchall()]
