"""Domain value objects for the social API."""

from enum import Enum

from pydantic import field_validator

from social.domain.value.common import RootValueObject


class Username(RootValueObject[str]):
    """Public, unique user name (1-100 characters)."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not blank and within length limits."""
        if not v.strip() or len(v) > 100:
            raise ValueError("Username must be 1-100 characters")
        return v


class SortDirection(str, Enum):
    """Creation-time ordering of feed items."""

    ASC = "asc"
    DESC = "desc"


class RoleName(str, Enum):
    """Role names seeded into the roles table."""

    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"
