"""In-memory follower repository for testing."""

from social.domain.error import AlreadyFollowingError
from social.domain.model import Follower
from social.domain.repository.follower import FollowerRepository
from social.domain.value import UserId

from .store import InMemoryStore


class InMemoryFollowerRepository(FollowerRepository):
    """In-memory implementation of FollowerRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def follow(self, follower_id: UserId, followed_id: UserId) -> Follower:
        """Insert the edge unless it already exists."""
        key = (followed_id, follower_id)
        if key in self.store.followers:
            raise AlreadyFollowingError(follower_id, followed_id)

        edge = Follower(user_id=followed_id, follower_id=follower_id)
        self.store.followers[key] = edge
        return edge

    async def unfollow(self, follower_id: UserId, followed_id: UserId) -> None:
        """Delete the edge if present."""
        self.store.followers.pop((followed_id, follower_id), None)
