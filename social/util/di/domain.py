"""Domain layer DI providers."""

from datetime import timedelta

from dishka import Scope, provide

from social.config import Settings, TokenSettings
from social.domain.repository import (
    CommentRepository,
    FollowerRepository,
    PostRepository,
    RoleRepository,
    UserCache,
    UserRepository,
)
from social.domain.service import (
    AuthorizationService,
    CommentService,
    FollowerService,
    JWTService,
    PostService,
    UserCacheService,
    UserService,
)
from social.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, token_settings: TokenSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(token_settings=token_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, settings: Settings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            invitation_expiry=timedelta(hours=settings.mail.invitation_expiry_hours),
        )

    @provide
    def get_user_cache_service(
        self, user_service: UserService, user_cache: UserCache, settings: Settings
    ) -> UserCacheService:
        """Provide read-through user cache service."""
        return UserCacheService(
            user_service=user_service,
            user_cache=user_cache,
            enabled=settings.redis.enabled,
        )

    @provide
    def get_authorization_service(
        self,
        jwt_service: JWTService,
        user_cache_service: UserCacheService,
        role_repository: RoleRepository,
    ) -> AuthorizationService:
        """Provide authentication and authorization service."""
        return AuthorizationService(
            jwt_service=jwt_service,
            user_cache_service=user_cache_service,
            role_repository=role_repository,
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_follower_service(
        self, follower_repository: FollowerRepository, user_service: UserService
    ) -> FollowerService:
        """Provide follower domain service."""
        return FollowerService(
            follower_repository=follower_repository, user_service=user_service
        )
