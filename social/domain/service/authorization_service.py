"""Request authentication and ownership/role-precedence authorization."""

import logfire

from social.domain.error import AuthenticationError, AuthorizationError, InternalError
from social.domain.model import User
from social.domain.repository import RoleRepository
from social.domain.value import UserId
from social.util.jwt import JWTError

from .base import Service
from .jwt_service import JWTService
from .user_cache_service import UserCacheService

BEARER_SCHEME = "Bearer"


class AuthorizationService(Service):
    """Turns an Authorization header into a user and checks privileges."""

    def __init__(
        self,
        jwt_service: JWTService,
        user_cache_service: UserCacheService,
        role_repository: RoleRepository,
    ) -> None:
        """Initialize authorization service.

        Args:
            jwt_service: Bearer token validation
            user_cache_service: Resolves token subjects to users
            role_repository: Role lookups for precedence checks
        """
        self.jwt_service = jwt_service
        self.user_cache_service = user_cache_service
        self.role_repository = role_repository

    async def authenticate(self, authorization: str | None) -> User:
        """Resolve the caller from a ``Bearer <token>`` header.

        Every failure, including a failed user lookup, is reported as
        AuthenticationError so clients see a uniform 401.

        Args:
            authorization: Raw Authorization header value

        Returns:
            The authenticated user

        Raises:
            AuthenticationError: If the caller cannot be authenticated
        """
        with logfire.span("authorization_service.authenticate"):
            if not authorization:
                raise AuthenticationError("authorization header is missing")

            scheme, _, token = authorization.partition(" ")
            if scheme != BEARER_SCHEME or not token:
                raise AuthenticationError("authorization header is malformed")

            try:
                claims = self.jwt_service.verify_token(token)
            except JWTError as e:
                raise AuthenticationError(str(e)) from e

            if not claims.sub.isdigit():
                logfire.warn("Token subject is not a user id", subject=claims.sub)
                raise AuthenticationError("token subject is not a user id")
            user_id = UserId(int(claims.sub))

            try:
                user = await self.user_cache_service.resolve(user_id)
            except Exception as e:
                logfire.warn(
                    "Token subject could not be resolved",
                    user_id=user_id,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise AuthenticationError("user lookup failed") from e

            logfire.info("Request authenticated", user_id=user.id)
            return user

    async def authorize(self, actor: User, owner_id: UserId, required_role: str) -> None:
        """Allow the owner, or anyone whose role is at least ``required_role``.

        The role table is only consulted when the actor is not the owner.

        Args:
            actor: Authenticated caller
            owner_id: Owner of the resource being mutated
            required_role: Name of the least privileged role allowed

        Raises:
            AuthorizationError: If the actor is neither owner nor privileged
            InternalError: If the required role cannot be looked up
        """
        with logfire.span(
            "authorization_service.authorize",
            actor_id=actor.id,
            owner_id=owner_id,
            required_role=required_role,
        ):
            if actor.id == owner_id:
                return

            try:
                role = await self.role_repository.find_by_name(required_role)
            except Exception as e:
                logfire.error(
                    "Role lookup failed", required_role=required_role, error=str(e)
                )
                raise InternalError(f"role lookup failed: {required_role}") from e

            if role is None:
                logfire.error("Required role does not exist", required_role=required_role)
                raise InternalError(f"role not found: {required_role}")

            if actor.role.level < role.level:
                logfire.warn(
                    "Insufficient role",
                    actor_id=actor.id,
                    actor_role=actor.role.name,
                    required_role=required_role,
                )
                raise AuthorizationError(required_role)
