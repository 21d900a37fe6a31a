"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import Optional

import logfire
from sqlalchemy import Select, delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.error import DuplicateEmailError, DuplicateUsernameError
from social.domain.model import User
from social.domain.repository.user import UserRepository
from social.domain.value import Password, UserId, Username
from social.persistence.error import unique_violation_constraint
from social.persistence.mappers import row_to_user
from social.persistence.tables import roles_table, user_invitations_table, users_table


def _select_users() -> Select:
    """Users joined with their role."""
    return select(
        users_table,
        roles_table.c.name.label("role_name"),
        roles_table.c.level.label("role_level"),
        roles_table.c.description.label("role_description"),
    ).select_from(users_table.join(roles_table, users_table.c.role_id == roles_table.c.id))


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        with logfire.span("user_repository.find_by_id", user_id=user_id):
            stmt = _select_users().where(users_table.c.id == user_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            return row_to_user(row._mapping)

    async def find_active_by_email(self, email: str) -> Optional[User]:
        """Find an active user by email, with the password hash attached."""
        with logfire.span("user_repository.find_active_by_email"):
            stmt = _select_users().where(
                users_table.c.email == email,
                users_table.c.is_active.is_(True),
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            return row_to_user(row._mapping, include_password=True)

    async def create_and_invite(
        self,
        username: Username,
        email: str,
        password: Password,
        role_name: str,
        token_hash: str,
        expires_at: datetime,
    ) -> User:
        """Insert the user and its invitation inside one savepoint."""
        with logfire.span("user_repository.create_and_invite", username=username.root):
            role_id = (
                select(roles_table.c.id)
                .where(roles_table.c.name == role_name)
                .scalar_subquery()
            )

            try:
                async with self.session.begin_nested():
                    result = await self.session.execute(
                        insert(users_table)
                        .values(
                            username=username.root,
                            email=email,
                            password=password.hash,
                            role_id=role_id,
                        )
                        .returning(users_table.c.id)
                    )
                    user_id = UserId(result.scalar_one())

                    await self.session.execute(
                        insert(user_invitations_table).values(
                            token=token_hash,
                            user_id=user_id,
                            expiry=expires_at,
                        )
                    )
            except IntegrityError as e:
                constraint = unique_violation_constraint(e)
                if constraint and "email" in constraint:
                    raise DuplicateEmailError(email) from e
                if constraint and "username" in constraint:
                    raise DuplicateUsernameError(username.root) from e
                raise

            user = await self.find_by_id(user_id)
            assert user is not None
            return user

    async def activate(self, token_hash: str, now: datetime) -> Optional[User]:
        """Activate the invited user and consume its invitations."""
        with logfire.span("user_repository.activate"):
            async with self.session.begin_nested():
                result = await self.session.execute(
                    select(user_invitations_table.c.user_id).where(
                        user_invitations_table.c.token == token_hash,
                        user_invitations_table.c.expiry > now,
                    )
                )
                user_id = result.scalar_one_or_none()

                if user_id is None:
                    return None

                await self.session.execute(
                    update(users_table)
                    .where(users_table.c.id == user_id)
                    .values(is_active=True)
                )
                await self.session.execute(
                    delete(user_invitations_table).where(
                        user_invitations_table.c.user_id == user_id
                    )
                )

            return await self.find_by_id(UserId(user_id))

    async def delete(self, user_id: UserId) -> None:
        """Delete the user and its invitations inside one savepoint."""
        with logfire.span("user_repository.delete", user_id=user_id):
            async with self.session.begin_nested():
                await self.session.execute(
                    delete(user_invitations_table).where(
                        user_invitations_table.c.user_id == user_id
                    )
                )
                await self.session.execute(
                    delete(users_table).where(users_table.c.id == user_id)
                )
