"""PostgreSQL implementation of Follower repository."""

import logfire
from sqlalchemy import delete, insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.error import AlreadyFollowingError
from social.domain.model import Follower
from social.domain.repository.follower import FollowerRepository
from social.domain.value import UserId
from social.persistence.error import unique_violation_constraint
from social.persistence.tables import followers_table


class PostgresFollowerRepository(FollowerRepository):
    """PostgreSQL implementation of FollowerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def follow(self, follower_id: UserId, followed_id: UserId) -> Follower:
        """Insert the edge; a duplicate is reported as AlreadyFollowingError."""
        with logfire.span(
            "follower_repository.follow",
            follower_id=follower_id,
            followed_id=followed_id,
        ):
            try:
                async with self.session.begin_nested():
                    result = await self.session.execute(
                        insert(followers_table)
                        .values(user_id=followed_id, follower_id=follower_id)
                        .returning(followers_table.c.created_at)
                    )
                    created_at = result.scalar_one()
            except IntegrityError as e:
                if unique_violation_constraint(e) is not None:
                    raise AlreadyFollowingError(follower_id, followed_id) from e
                raise

            return Follower(
                user_id=followed_id, follower_id=follower_id, created_at=created_at
            )

    async def unfollow(self, follower_id: UserId, followed_id: UserId) -> None:
        """Delete the edge if present."""
        with logfire.span(
            "follower_repository.unfollow",
            follower_id=follower_id,
            followed_id=followed_id,
        ):
            await self.session.execute(
                delete(followers_table).where(
                    followers_table.c.user_id == followed_id,
                    followers_table.c.follower_id == follower_id,
                )
            )
