"""In-memory role repository for testing."""

from typing import Optional

from social.domain.model import Role
from social.domain.repository.role import RoleRepository

from .store import InMemoryStore


class InMemoryRoleRepository(RoleRepository):
    """In-memory implementation of RoleRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()
        self.lookups: list[str] = []

    async def find_by_name(self, name: str) -> Optional[Role]:
        """Find a role by name, recording the lookup."""
        self.lookups.append(name)
        return self.store.roles.get(name)
