"""Unit tests for the in-memory feed query."""

from datetime import datetime, timedelta, timezone

import pytest

from social.domain.repository import (
    CommentRepository,
    FollowerRepository,
    PostRepository,
)
from social.domain.service import UserService
from social.domain.value import FeedQuery, SortDirection
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


async def _seed(unit_env):
    """alice follows bob; carol is a stranger. Posts are one hour apart."""
    user_service = await unit_env.get(UserService)
    post_repo = await unit_env.get(PostRepository)
    follower_repo = await unit_env.get(FollowerRepository)

    alice, _ = await user_service.register("alice", "alice@example.com", "secret123")
    bob, _ = await user_service.register("bob", "bob@example.com", "secret123")
    carol, _ = await user_service.register("carol", "carol@example.com", "secret123")
    await follower_repo.follow(alice.id, bob.id)

    specs = [
        (alice, "Alice on Go", "goroutines", ["go"]),
        (bob, "Bob on Python", "asyncio everywhere", ["python", "async"]),
        (carol, "Carol on Go", "not followed", ["go"]),
        (bob, "Bob on Rust", "borrow checker", ["rust"]),
    ]
    posts = []
    for hour, (author, title, content, tags) in enumerate(specs):
        post = await post_repo.create(author.id, title, content, tags)
        # Pin creation times so ordering does not depend on the clock
        post = post.model_copy(update={"created_at": BASE_TIME + timedelta(hours=hour)})
        post_repo.store.posts[post.id] = post
        posts.append(post)

    return alice, posts


class TestGetUserFeed:
    """Tests for PostRepository.get_user_feed."""

    @pytest.mark.asyncio
    async def test_feed_contains_own_and_followed_posts_newest_first(self, unit_env):
        # Arrange
        alice, posts = await _seed(unit_env)
        post_repo = await unit_env.get(PostRepository)

        # Act
        items = await post_repo.get_user_feed(alice.id, FeedQuery())

        # Assert
        assert [i.post.title for i in items] == [
            "Bob on Rust",
            "Bob on Python",
            "Alice on Go",
        ]
        assert items[0].author_username == "bob"

    @pytest.mark.asyncio
    async def test_ascending_sort(self, unit_env):
        alice, _ = await _seed(unit_env)
        post_repo = await unit_env.get(PostRepository)

        items = await post_repo.get_user_feed(
            alice.id, FeedQuery(sort=SortDirection.ASC)
        )

        assert items[0].post.title == "Alice on Go"

    @pytest.mark.asyncio
    async def test_limit_and_offset_page_the_feed(self, unit_env):
        alice, _ = await _seed(unit_env)
        post_repo = await unit_env.get(PostRepository)

        first = await post_repo.get_user_feed(alice.id, FeedQuery(limit=2))
        second = await post_repo.get_user_feed(alice.id, FeedQuery(limit=2, offset=2))

        assert len(first) == 2
        assert [i.post.title for i in second] == ["Alice on Go"]

    @pytest.mark.asyncio
    async def test_search_matches_title_or_content_case_insensitively(self, unit_env):
        alice, _ = await _seed(unit_env)
        post_repo = await unit_env.get(PostRepository)

        by_title = await post_repo.get_user_feed(alice.id, FeedQuery(search="PYTHON"))
        by_content = await post_repo.get_user_feed(alice.id, FeedQuery(search="borrow"))

        assert [i.post.title for i in by_title] == ["Bob on Python"]
        assert [i.post.title for i in by_content] == ["Bob on Rust"]

    @pytest.mark.asyncio
    async def test_tags_match_any(self, unit_env):
        """A post matches if it carries at least one of the tags."""
        alice, _ = await _seed(unit_env)
        post_repo = await unit_env.get(PostRepository)

        items = await post_repo.get_user_feed(alice.id, FeedQuery(tags=["go", "rust"]))

        assert {i.post.title for i in items} == {"Alice on Go", "Bob on Rust"}

    @pytest.mark.asyncio
    async def test_since_and_until_are_inclusive(self, unit_env):
        alice, _ = await _seed(unit_env)
        post_repo = await unit_env.get(PostRepository)

        items = await post_repo.get_user_feed(
            alice.id,
            FeedQuery(since=BASE_TIME + timedelta(hours=1), until=BASE_TIME + timedelta(hours=1)),
        )

        assert [i.post.title for i in items] == ["Bob on Python"]

    @pytest.mark.asyncio
    async def test_comment_count_defaults_to_zero(self, unit_env):
        alice, posts = await _seed(unit_env)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.create(posts[0].id, alice.id, "one")
        await comment_repo.create(posts[0].id, alice.id, "two")

        items = await post_repo.get_user_feed(alice.id, FeedQuery())
        counts = {i.post.title: i.comment_count for i in items}

        assert counts["Alice on Go"] == 2
        assert counts["Bob on Python"] == 0
