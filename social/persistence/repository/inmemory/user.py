"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from social.domain.error import DuplicateEmailError, DuplicateUsernameError
from social.domain.model import User
from social.domain.repository.user import UserRepository
from social.domain.value import Password, UserId, Username

from .store import InMemoryStore, Invitation


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Counts lookups by ID so tests can tell cache hits from database reads.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()
        self.find_by_id_calls = 0

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID (without its password)."""
        self.find_by_id_calls += 1
        user = self.store.users.get(user_id)
        return user.model_copy(update={"password": None}) if user else None

    async def find_active_by_email(self, email: str) -> Optional[User]:
        """Find an active user by email (case-insensitive)."""
        for user in self.store.users.values():
            if user.email.lower() == email.lower() and user.is_active:
                return user
        return None

    async def create_and_invite(
        self,
        username: Username,
        email: str,
        password: Password,
        role_name: str,
        token_hash: str,
        expires_at: datetime,
    ) -> User:
        """Create an inactive user with its invitation."""
        for existing in self.store.users.values():
            if existing.email.lower() == email.lower():
                raise DuplicateEmailError(email)
            if existing.username == username:
                raise DuplicateUsernameError(username.root)

        role = self.store.roles[role_name]
        user = User(
            id=self.store.next_user_id(),
            username=username,
            email=email,
            password=password,
            is_active=False,
            role=role,
        )
        self.store.users[user.id] = user
        self.store.invitations[token_hash] = Invitation(
            user_id=user.id, expiry=expires_at
        )
        return user.model_copy(update={"password": None})

    async def activate(self, token_hash: str, now: datetime) -> Optional[User]:
        """Activate the invited user and consume its invitations."""
        invitation = self.store.invitations.get(token_hash)
        if invitation is None or invitation.expiry <= now:
            return None

        user = self.store.users[invitation.user_id]
        self.store.users[user.id] = user.model_copy(update={"is_active": True})
        self._delete_invitations(user.id)
        return await self.find_by_id(user.id)

    async def delete(self, user_id: UserId) -> None:
        """Delete a user and its invitations."""
        self._delete_invitations(user_id)
        self.store.users.pop(user_id, None)

    def _delete_invitations(self, user_id: UserId) -> None:
        for token_hash in [
            h for h, inv in self.store.invitations.items() if inv.user_id == user_id
        ]:
            del self.store.invitations[token_hash]
