"""Base use case and the ownership guard for mutating use cases."""

import functools
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Protocol

from social.domain.model import User
from social.domain.service import AuthorizationService
from social.domain.value import RoleName, UserId


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class OwnedResourceRequest(Protocol):
    """Request acting on a resource that belongs to a user."""

    @property
    def actor(self) -> User: ...

    @property
    def owner_id(self) -> UserId: ...


class GuardedUseCase(Protocol):
    authorization_service: AuthorizationService


Execute = Callable[[Any, Any], Awaitable[Any]]


def requires_ownership(required_role: RoleName) -> Callable[[Execute], Execute]:
    """Guard ``execute`` behind an ownership or role-precedence check.

    The actor may proceed if it owns the resource, or if its role level is
    at least that of ``required_role``. The wrapped method only runs once
    the check passed.

    Args:
        required_role: Least privileged role allowed to act on others'
            resources

    Returns:
        Decorator for a use case's ``execute`` method
    """

    def decorator(execute: Execute) -> Execute:
        @functools.wraps(execute)
        async def guarded(self: GuardedUseCase, request: OwnedResourceRequest) -> Any:
            await self.authorization_service.authorize(
                request.actor, request.owner_id, required_role.value
            )
            return await execute(self, request)

        return guarded

    return decorator
