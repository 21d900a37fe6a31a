"""Mock persistence providers for testing."""

from dishka import Scope, provide

from social.domain.repository import (
    CommentRepository,
    FollowerRepository,
    PostRepository,
    RoleRepository,
    UserRepository,
)
from social.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryFollowerRepository,
    InMemoryPostRepository,
    InMemoryRoleRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from social.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so writes survive across requests of one
    container, like a database would. Each container gets a fresh store,
    which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_role_repository(self, store: InMemoryStore) -> RoleRepository:
        """Provide in-memory role repository."""
        return InMemoryRoleRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, store: InMemoryStore) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_follower_repository(self, store: InMemoryStore) -> FollowerRepository:
        """Provide in-memory follower repository."""
        return InMemoryFollowerRepository(store)
