"""End-to-end tests for the comments API.

Runs the real FastAPI app against a test container with in-memory
persistence. Tokens are minted with the same settings the app verifies with.
"""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from remark.config import Settings
from remark.interface.api.app import create_app
from remark.util.jwt import create_token
from tests.di import build_test_container

BASE = "/api/v1/comments"


@pytest.fixture
def client():
    """Create test client backed by a fresh in-memory container."""
    app = create_app(build_test_container())
    with TestClient(app) as test_client:
        yield test_client


def auth_headers(user_id: str) -> dict[str, str]:
    token = create_token(user_id, Settings().auth)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice():
    return str(uuid4())


@pytest.fixture
def bob():
    return str(uuid4())


class TestAuthentication:
    def test_missing_token_is_401(self, client):
        response = client.get(BASE)
        assert response.status_code == 401

    def test_garbage_token_is_401(self, client):
        response = client.get(BASE, headers={"Authorization": "Bearer nonsense"})
        assert response.status_code == 401

    def test_non_uuid_user_is_401(self, client):
        response = client.get(BASE, headers=auth_headers("not-a-uuid"))
        assert response.status_code == 401

    def test_cookie_token_accepted(self, client, alice):
        client.cookies.set("auth_token", create_token(alice, Settings().auth))

        response = client.get(BASE)

        assert response.status_code == 200


class TestCreateComment:
    def test_create_returns_201(self, client, alice):
        response = client.post(
            BASE, json={"content": "  Hello world  "}, headers=auth_headers(alice)
        )

        assert response.status_code == 201
        data = response.json()
        assert data["content"] == "Hello world"
        assert data["author_id"] == alice
        assert data["like_count"] == 0
        assert data["is_deleted"] is False

    @pytest.mark.parametrize("content", ["", "   ", "x" * 2001])
    def test_invalid_content_is_422(self, client, alice, content):
        response = client.post(
            BASE, json={"content": content}, headers=auth_headers(alice)
        )
        assert response.status_code == 422

    def test_missing_parent_is_404(self, client, alice):
        response = client.post(
            BASE,
            json={"content": "reply", "parent_id": str(uuid4())},
            headers=auth_headers(alice),
        )
        assert response.status_code == 404


class TestOwnership:
    def test_non_author_update_is_403(self, client, alice, bob):
        created = client.post(
            BASE, json={"content": "mine"}, headers=auth_headers(alice)
        ).json()

        response = client.patch(
            f"{BASE}/{created['comment_id']}",
            json={"content": "yours now"},
            headers=auth_headers(bob),
        )

        assert response.status_code == 403

    def test_non_author_delete_is_403(self, client, alice, bob):
        created = client.post(
            BASE, json={"content": "mine"}, headers=auth_headers(alice)
        ).json()

        response = client.delete(
            f"{BASE}/{created['comment_id']}", headers=auth_headers(bob)
        )

        assert response.status_code == 403

    def test_update_after_delete_is_409(self, client, alice):
        created = client.post(
            BASE, json={"content": "short-lived"}, headers=auth_headers(alice)
        ).json()
        comment_url = f"{BASE}/{created['comment_id']}"

        deleted = client.delete(comment_url, headers=auth_headers(alice))
        assert deleted.status_code == 200
        assert deleted.json()["success"] is True

        response = client.patch(
            comment_url, json={"content": "back"}, headers=auth_headers(alice)
        )
        assert response.status_code == 409

        fetched = client.get(comment_url, headers=auth_headers(alice)).json()
        assert fetched["is_deleted"] is True
        assert fetched["content"] == "short-lived"

    def test_get_unknown_is_404(self, client, alice):
        response = client.get(f"{BASE}/{uuid4()}", headers=auth_headers(alice))
        assert response.status_code == 404


class TestThreadScenario:
    """A full conversation: post, vote, reply, list."""

    def test_like_dislike_and_replies(self, client, alice, bob):
        carol = str(uuid4())

        # Alice posts
        created = client.post(
            BASE, json={"content": "Hello"}, headers=auth_headers(alice)
        )
        comment_id = created.json()["comment_id"]
        comment_url = f"{BASE}/{comment_id}"

        # Bob likes
        liked = client.post(f"{comment_url}/like", headers=auth_headers(bob)).json()
        assert liked["like_count"] == 1
        assert liked["has_liked"] is True

        # Bob switches to dislike
        disliked = client.post(
            f"{comment_url}/dislike", headers=auth_headers(bob)
        ).json()
        assert disliked["like_count"] == 0
        assert disliked["dislike_count"] == 1
        assert disliked["has_disliked"] is True

        # Bob dislikes again: back to neutral
        neutral = client.post(
            f"{comment_url}/dislike", headers=auth_headers(bob)
        ).json()
        assert neutral["dislike_count"] == 0
        assert neutral["has_disliked"] is False

        # Carol replies twice
        for text in ("first reply", "second reply"):
            reply = client.post(
                BASE,
                json={"content": text, "parent_id": comment_id},
                headers=auth_headers(carol),
            )
            assert reply.status_code == 201

        # Replies are newest first
        replies = client.get(
            f"{comment_url}/replies", headers=auth_headers(alice)
        ).json()
        assert [r["content"] for r in replies["comments"]] == [
            "second reply",
            "first reply",
        ]
        assert replies["meta"] == {
            "page": 1,
            "page_size": 5,
            "total": 2,
            "total_pages": 1,
        }

        # Top-level listing only shows Alice's comment
        listing = client.get(BASE, headers=auth_headers(alice)).json()
        assert [c["comment_id"] for c in listing["comments"]] == [comment_id]
        assert listing["meta"]["page_size"] == 10

        # Statistics
        stats = client.get(f"{BASE}/statistics", headers=auth_headers(alice)).json()
        assert stats["total"] == 3
        assert stats["top_level"] == 1
        assert stats["replies"] == 2

    def test_sort_by_most_liked(self, client, alice, bob):
        quiet = client.post(
            BASE, json={"content": "quiet"}, headers=auth_headers(alice)
        ).json()
        loud = client.post(
            BASE, json={"content": "loud"}, headers=auth_headers(alice)
        ).json()
        client.post(f"{BASE}/{quiet['comment_id']}/like", headers=auth_headers(bob))
        client.post(f"{BASE}/{quiet['comment_id']}/like", headers=auth_headers(alice))
        client.post(f"{BASE}/{loud['comment_id']}/like", headers=auth_headers(bob))

        listing = client.get(
            BASE, params={"sort": "mostLiked"}, headers=auth_headers(alice)
        ).json()

        assert [c["content"] for c in listing["comments"]] == ["quiet", "loud"]

    def test_unknown_sort_is_422(self, client, alice):
        response = client.get(
            BASE, params={"sort": "popular"}, headers=auth_headers(alice)
        )
        assert response.status_code == 422

    def test_page_size_above_maximum_is_422(self, client, alice):
        response = client.get(
            BASE, params={"page_size": 500}, headers=auth_headers(alice)
        )
        assert response.status_code == 422


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
