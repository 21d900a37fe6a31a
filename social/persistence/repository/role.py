"""PostgreSQL implementation of Role repository."""

from typing import Optional

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.model import Role
from social.domain.repository.role import RoleRepository
from social.persistence.mappers import row_to_role
from social.persistence.tables import roles_table


class PostgresRoleRepository(RoleRepository):
    """PostgreSQL implementation of RoleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_name(self, name: str) -> Optional[Role]:
        """Find a role by name."""
        with logfire.span("role_repository.find_by_name", name=name):
            result = await self.session.execute(
                select(roles_table).where(roles_table.c.name == name)
            )
            row = result.fetchone()
            return row_to_role(row._mapping) if row else None
