"""End-to-end tests for follows, posts, comments and the feed."""

import pytest
from fastapi.testclient import TestClient

from tests.harness import create_test_app, sign_up


@pytest.fixture
def client():
    """Create test client."""
    with TestClient(create_test_app()) as test_client:
        yield test_client


def _create_post(client, headers, title="Hello", tags=None) -> dict:
    response = client.post(
        "/v1/posts",
        json={"title": title, "content": "Body of " + title, "tags": tags or []},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestFollows:
    """Follow and unfollow."""

    def test_follow_twice_conflicts_and_unfollow_succeeds(self, client):
        # Arrange
        _, alice = sign_up(client, "alice")
        bob_id, _ = sign_up(client, "bob")

        # Act
        first = client.put(f"/v1/users/{bob_id}/follow", headers=alice)
        second = client.put(f"/v1/users/{bob_id}/follow", headers=alice)
        unfollow = client.put(f"/v1/users/{bob_id}/unfollow", headers=alice)

        # Assert
        assert first.status_code == 204
        assert second.status_code == 409
        assert unfollow.status_code == 204

    def test_non_integer_id_is_bad_request(self, client):
        _, alice = sign_up(client, "alice")

        response = client.put("/v1/users/bob/follow", headers=alice)

        assert response.status_code == 400


class TestPosts:
    """Post lifecycle."""

    def test_get_post_includes_comments(self, client):
        # Arrange
        _, alice = sign_up(client, "alice")
        post = _create_post(client, alice)
        commented = client.post(
            f"/v1/posts/{post['id']}/comments",
            json={"content": "First!"},
            headers=alice,
        )

        # Act
        response = client.get(f"/v1/posts/{post['id']}", headers=alice)

        # Assert
        assert commented.status_code == 201
        assert response.status_code == 200
        data = response.json()
        assert data["version"] == 1
        assert [c["content"] for c in data["comments"]] == ["First!"]
        assert data["comments"][0]["username"] == "alice"

    def test_update_bumps_version_and_stale_version_is_not_found(self, client):
        # Arrange
        _, alice = sign_up(client, "alice")
        post = _create_post(client, alice)

        # Act
        updated = client.patch(
            f"/v1/posts/{post['id']}",
            json={"content": "Edited", "version": 1},
            headers=alice,
        )
        stale = client.patch(
            f"/v1/posts/{post['id']}",
            json={"content": "Late", "version": 1},
            headers=alice,
        )

        # Assert
        assert updated.status_code == 200
        assert updated.json()["version"] == 2
        assert updated.json()["title"] == "Hello"
        assert stale.status_code == 404
        assert stale.json() == {"error": "not found"}

    def test_stranger_cannot_delete_but_owner_can(self, client):
        _, alice = sign_up(client, "alice")
        _, bob = sign_up(client, "bob")
        post = _create_post(client, alice)

        forbidden = client.delete(f"/v1/posts/{post['id']}", headers=bob)
        deleted = client.delete(f"/v1/posts/{post['id']}", headers=alice)
        missing = client.get(f"/v1/posts/{post['id']}", headers=alice)

        assert forbidden.status_code == 403
        assert forbidden.json() == {"error": "forbidden"}
        assert deleted.status_code == 204
        assert missing.status_code == 404

    def test_comment_on_missing_post_is_not_found(self, client):
        _, alice = sign_up(client, "alice")

        response = client.post(
            "/v1/posts/999/comments", json={"content": "Hello?"}, headers=alice
        )

        assert response.status_code == 404

    def test_stranger_cannot_edit_comment(self, client):
        _, alice = sign_up(client, "alice")
        _, bob = sign_up(client, "bob")
        post = _create_post(client, alice)
        comment = client.post(
            f"/v1/posts/{post['id']}/comments", json={"content": "Mine"}, headers=alice
        ).json()

        response = client.patch(
            f"/v1/comments/{comment['id']}", json={"content": "Yours"}, headers=bob
        )

        assert response.status_code == 403


class TestFeed:
    """The user feed."""

    def test_feed_contains_own_and_followed_posts(self, client):
        # Arrange
        _, alice = sign_up(client, "alice")
        bob_id, bob = sign_up(client, "bob")
        _, carol = sign_up(client, "carol")
        _create_post(client, alice, title="Alice post")
        _create_post(client, bob, title="Bob post", tags=["go"])
        _create_post(client, carol, title="Carol post")
        client.put(f"/v1/users/{bob_id}/follow", headers=alice)

        # Act
        response = client.get("/v1/users/feed", headers=alice)

        # Assert
        assert response.status_code == 200
        titles = {item["title"] for item in response.json()}
        assert titles == {"Alice post", "Bob post"}

    def test_limit_caps_page_size(self, client):
        _, alice = sign_up(client, "alice")
        for i in range(7):
            _create_post(client, alice, title=f"Post {i}")

        response = client.get("/v1/users/feed", params={"limit": 5}, headers=alice)

        assert response.status_code == 200
        assert len(response.json()) == 5

    def test_invalid_sort_is_bad_request(self, client):
        _, alice = sign_up(client, "alice")

        response = client.get("/v1/users/feed", params={"sort": "bad"}, headers=alice)

        assert response.status_code == 400
        assert "error" in response.json()

    @pytest.mark.parametrize("since", ["2024-01-01", "2024-01-01T00:00:00"])
    def test_timestamp_without_offset_is_ignored(self, client, since):
        _, alice = sign_up(client, "alice")
        _create_post(client, alice)

        response = client.get("/v1/users/feed", params={"since": since}, headers=alice)

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_since_bound_filters_older_posts(self, client):
        _, alice = sign_up(client, "alice")
        _create_post(client, alice)

        response = client.get(
            "/v1/users/feed", params={"since": "2999-01-01T00:00:00Z"}, headers=alice
        )

        assert response.status_code == 200
        assert response.json() == []
