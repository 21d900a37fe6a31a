"""User response shared by user and auth use cases."""

from datetime import datetime

from pydantic import BaseModel

from social.domain.model import User


class RoleResponse(BaseModel):
    """Role as exposed over the API."""

    id: int
    name: str
    level: int
    description: str


class UserResponse(BaseModel):
    """User as exposed over the API (never includes the password)."""

    id: int
    username: str
    email: str
    is_active: bool
    created_at: datetime
    role: RoleResponse

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username.root,
            email=user.email,
            is_active=user.is_active,
            created_at=user.created_at,
            role=RoleResponse(
                id=user.role.id,
                name=user.role.name,
                level=user.role.level,
                description=user.role.description,
            ),
        )
