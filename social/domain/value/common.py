"""Base classes for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Immutable value compared by its fields."""

    model_config = ConfigDict(frozen=True)


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Value object wrapping a single primitive.

    The wrapped value is available as ``.root`` and ``model_dump()``
    returns the primitive itself, so usernames serialize as plain strings.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
