"""Role reference data."""

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import RoleId


class Role(DomainModel):
    """Named privilege level.

    A caller whose role level is at least the required role's level passes
    role-precedence checks.
    """

    id: RoleId
    name: str = Field(min_length=1, max_length=255)
    level: int = Field(ge=0)
    description: str = ""
