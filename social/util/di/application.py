"""Application layer DI providers."""

from dishka import Scope, provide

from social.application.usecase.auth import CreateTokenUseCase, RegisterUserUseCase
from social.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from social.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    UpdatePostUseCase,
)
from social.application.usecase.user import (
    ActivateUserUseCase,
    FollowUserUseCase,
    GetUserFeedUseCase,
    GetUserUseCase,
    UnfollowUserUseCase,
)
from social.config import Settings
from social.domain.service import (
    AuthorizationService,
    CommentService,
    FollowerService,
    JWTService,
    PostService,
    UserCacheService,
    UserService,
)
from social.domain.service.mailer import MailClient
from social.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_user_use_case(
        self, user_service: UserService, mail_client: MailClient, settings: Settings
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(
            user_service=user_service, mail_client=mail_client, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_create_token_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> CreateTokenUseCase:
        """Provide create token use case."""
        return CreateTokenUseCase(user_service=user_service, jwt_service=jwt_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_activate_user_use_case(
        self, user_service: UserService
    ) -> ActivateUserUseCase:
        """Provide activate user use case."""
        return ActivateUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(
        self, user_cache_service: UserCacheService
    ) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_cache_service=user_cache_service)

    @provide(scope=Scope.REQUEST)
    def get_follow_user_use_case(
        self, follower_service: FollowerService
    ) -> FollowUserUseCase:
        """Provide follow user use case."""
        return FollowUserUseCase(follower_service=follower_service)

    @provide(scope=Scope.REQUEST)
    def get_unfollow_user_use_case(
        self, follower_service: FollowerService
    ) -> UnfollowUserUseCase:
        """Provide unfollow user use case."""
        return UnfollowUserUseCase(follower_service=follower_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_feed_use_case(
        self, post_service: PostService
    ) -> GetUserFeedUseCase:
        """Provide get user feed use case."""
        return GetUserFeedUseCase(post_service=post_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, comment_service: CommentService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self, post_service: PostService, authorization_service: AuthorizationService
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service, authorization_service=authorization_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self, post_service: PostService, authorization_service: AuthorizationService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service, authorization_service=authorization_service
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, post_service: PostService, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            post_service=post_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, post_service: PostService, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            post_service=post_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            authorization_service=authorization_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            authorization_service=authorization_service,
        )
