"""Integration tests for PostgresPostRepository.

These tests run the feed query and the version-conditioned update against
a migrated PostgreSQL database.
"""

import asyncio
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from social.domain.error import VersionConflictError
from social.domain.model import Post, User
from social.domain.repository import (
    CommentRepository,
    FollowerRepository,
    PostRepository,
    UserRepository,
)
from social.domain.value import FeedQuery, Password, RoleName, SortDirection, Username
from tests.harness import create_container_fixture, create_env_fixture

# Integration test fixtures
integration_env = create_env_fixture(unmock={"persistence"})
integration_container = create_container_fixture(unmock={"persistence"})


async def _create_user(user_repo: UserRepository, name: str) -> User:
    """Insert a user with a unique username and email."""
    suffix = uuid4().hex[:8]
    password = Password()
    password.set("secret123")

    return await user_repo.create_and_invite(
        username=Username(f"{name}-{suffix}"),
        email=f"{name}-{suffix}@example.com",
        password=password,
        role_name=RoleName.USER.value,
        token_hash=uuid4().hex,
        expires_at=datetime.now(timezone.utc) + timedelta(days=1),
    )


class TestUserFeedIntegration:
    """Integration tests for PostgresPostRepository.get_user_feed."""

    @pytest.mark.asyncio
    async def test_feed_holds_own_and_followed_posts_with_comment_counts(
        self, integration_env
    ):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        comment_repo = await integration_env.get(CommentRepository)
        follower_repo = await integration_env.get(FollowerRepository)

        alice = await _create_user(user_repo, "alice")
        bob = await _create_user(user_repo, "bob")
        carol = await _create_user(user_repo, "carol")
        await follower_repo.follow(alice.id, bob.id)

        own = await post_repo.create(alice.id, "Own", "mine", [])
        followed = await post_repo.create(bob.id, "Followed", "bob's", [])
        await post_repo.create(carol.id, "Stranger", "carol's", [])
        await comment_repo.create(followed.id, alice.id, "nice")
        await comment_repo.create(followed.id, carol.id, "agreed")

        # Act
        items = await post_repo.get_user_feed(alice.id, FeedQuery())

        # Assert
        by_id = {item.post.id: item for item in items}
        assert set(by_id) == {own.id, followed.id}
        assert by_id[followed.id].comment_count == 2
        assert by_id[followed.id].author_username == bob.username.root
        assert by_id[own.id].comment_count == 0

    @pytest.mark.asyncio
    async def test_search_and_tags_filter_the_feed(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        alice = await _create_user(user_repo, "alice")

        golang = await post_repo.create(alice.id, "Learning Go", "channels", ["go"])
        rust = await post_repo.create(alice.id, "Rust notes", "100% safe", ["rust"])
        await post_repo.create(alice.id, "Cooking", "pasta", ["food"])

        by_search = await post_repo.get_user_feed(alice.id, FeedQuery(search="learning"))
        by_tags = await post_repo.get_user_feed(
            alice.id, FeedQuery(tags=["go", "rust"])
        )
        by_literal_percent = await post_repo.get_user_feed(
            alice.id, FeedQuery(search="100%")
        )

        assert [item.post.id for item in by_search] == [golang.id]
        assert {item.post.id for item in by_tags} == {golang.id, rust.id}
        assert [item.post.id for item in by_literal_percent] == [rust.id]

    @pytest.mark.asyncio
    async def test_sort_and_window(self, integration_env):
        """Posts of one transaction share created_at; id orders them."""
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        alice = await _create_user(user_repo, "alice")
        posts = [
            await post_repo.create(alice.id, f"Post {i}", "body", []) for i in range(4)
        ]
        ids = [post.id for post in posts]

        newest_first = await post_repo.get_user_feed(alice.id, FeedQuery())
        oldest_page = await post_repo.get_user_feed(
            alice.id, FeedQuery(sort=SortDirection.ASC, limit=2, offset=1)
        )

        assert [item.post.id for item in newest_first] == list(reversed(ids))
        assert [item.post.id for item in oldest_page] == ids[1:3]

    @pytest.mark.asyncio
    async def test_since_and_until_bound_created_at(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        alice = await _create_user(user_repo, "alice")
        post = await post_repo.create(alice.id, "Hello", "World", [])
        hour = timedelta(hours=1)

        inside = await post_repo.get_user_feed(
            alice.id,
            FeedQuery(since=post.created_at - hour, until=post.created_at + hour),
        )
        after = await post_repo.get_user_feed(
            alice.id, FeedQuery(since=post.created_at + hour)
        )

        assert [item.post.id for item in inside] == [post.id]
        assert after == []


class TestPostUpdateIntegration:
    """Integration tests for PostgresPostRepository.update."""

    @pytest.mark.asyncio
    async def test_update_bumps_version(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        alice = await _create_user(user_repo, "alice")
        post = await post_repo.create(alice.id, "Hello", "World", ["a"])

        updated = await post_repo.update(
            post.model_copy(update={"content": "Edited", "tags": ["b"]})
        )

        assert updated.version == 2
        assert updated.content == "Edited"
        assert updated.tags == ["b"]

    @pytest.mark.asyncio
    async def test_stale_version_conflicts_and_leaves_post_unchanged(
        self, integration_env
    ):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        alice = await _create_user(user_repo, "alice")
        post = await post_repo.create(alice.id, "Hello", "World", [])
        await post_repo.update(post.model_copy(update={"content": "First"}))

        # Act
        with pytest.raises(VersionConflictError):
            await post_repo.update(post.model_copy(update={"content": "Late"}))

        # Assert
        stored = await post_repo.find_by_id(post.id)
        assert stored.content == "First"
        assert stored.version == 2

    @pytest.mark.asyncio
    async def test_concurrent_updates_in_separate_transactions_one_wins(
        self, integration_container
    ):
        """Both writers hold version 1; the row lock lets only one through."""
        # Arrange
        async with integration_container() as setup:
            user_repo = await setup.get(UserRepository)
            post_repo = await setup.get(PostRepository)
            alice = await _create_user(user_repo, "alice")
            post = await post_repo.create(alice.id, "Hello", "World", [])

        async def edit(content: str) -> Post:
            async with integration_container() as request_container:
                repo = await request_container.get(PostRepository)
                return await repo.update(post.model_copy(update={"content": content}))

        # Act
        results = await asyncio.gather(
            edit("from A"), edit("from B"), return_exceptions=True
        )

        # Assert
        winners = [r for r in results if isinstance(r, Post)]
        conflicts = [r for r in results if isinstance(r, VersionConflictError)]
        assert len(winners) == 1
        assert len(conflicts) == 1
        assert winners[0].version == 2

        async with integration_container() as check:
            stored = await (await check.get(PostRepository)).find_by_id(post.id)
        assert stored.content == winners[0].content
        assert stored.version == 2
