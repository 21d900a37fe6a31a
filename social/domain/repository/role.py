"""Role repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from social.domain.model import Role


class RoleRepository(ABC):
    """Read-only access to role reference data."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Role]:
        """Find a role by its unique name.

        Args:
            name: Role name (e.g. "moderator")

        Returns:
            The role if found, None otherwise
        """
        pass
