"""Unit tests for UserCacheService."""

import pytest

from social.domain.error import NotFoundError
from social.domain.repository import UserRepository
from social.domain.service import UserCacheService, UserService
from social.domain.value import UserId
from social.persistence.repository.inmemory import InMemoryUserCache
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _registered_user_id(user_service: UserService) -> UserId:
    user, _ = await user_service.register("alice", "alice@example.com", "secret123")
    return user.id


class TestResolve:
    """Tests for the read-through resolve method."""

    @pytest.mark.asyncio
    async def test_miss_reads_storage_once_then_hits_cache(self, unit_env):
        """The second lookup is served without touching storage."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        cache = InMemoryUserCache()
        service = UserCacheService(user_service, cache, enabled=True)
        user_id = await _registered_user_id(user_service)
        user_repo.find_by_id_calls = 0

        # Act
        first = await service.resolve(user_id)
        reads_after_first = user_repo.find_by_id_calls
        second = await service.resolve(user_id)

        # Assert
        assert reads_after_first == 1
        assert user_repo.find_by_id_calls == 1
        assert user_id in cache
        assert first.model_dump() == second.model_dump()

    @pytest.mark.asyncio
    async def test_disabled_cache_always_reads_storage(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        cache = InMemoryUserCache()
        service = UserCacheService(user_service, cache, enabled=False)
        user_id = await _registered_user_id(user_service)
        user_repo.find_by_id_calls = 0

        await service.resolve(user_id)
        await service.resolve(user_id)

        assert user_repo.find_by_id_calls == 2
        assert user_id not in cache

    @pytest.mark.asyncio
    async def test_cache_write_failure_propagates(self, unit_env):
        """A failing cache write aborts the lookup."""
        user_service = await unit_env.get(UserService)
        cache = InMemoryUserCache()
        cache.fail_writes = True
        service = UserCacheService(user_service, cache, enabled=True)
        user_id = await _registered_user_id(user_service)

        with pytest.raises(ConnectionError):
            await service.resolve(user_id)

    @pytest.mark.asyncio
    async def test_missing_user_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)
        service = UserCacheService(user_service, InMemoryUserCache(), enabled=True)

        with pytest.raises(NotFoundError):
            await service.resolve(UserId(404))

    @pytest.mark.asyncio
    async def test_expired_entry_is_read_again(self, unit_env):
        """Entries are logically absent after their TTL."""
        now = [0.0]
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        cache = InMemoryUserCache(clock=lambda: now[0])
        service = UserCacheService(user_service, cache, enabled=True)
        user_id = await _registered_user_id(user_service)
        await service.resolve(user_id)
        user_repo.find_by_id_calls = 0

        now[0] += cache.ttl.total_seconds()
        await service.resolve(user_id)

        assert user_repo.find_by_id_calls == 1
