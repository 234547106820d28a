"""E2E tests for the auth and comment endpoints."""

from uuid import uuid4

import pytest

from blog.domain.value import Role
from tests.harness import create_api_fixture

api = create_api_fixture()


@pytest.mark.asyncio
async def test_register_login_me(api):
    response = await api.client.post(
        "/api/auth/register",
        json={"username": "alice", "email": "Alice@Example.com", "password": "secret123"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["user"]["role"] == "User"
    assert data["user"]["email"] == "alice@example.com"
    assert "password_hash" not in data["user"]

    response = await api.client.post(
        "/api/auth/login",
        json={"email": "alice@example.com", "password": "secret123"},
    )
    assert response.status_code == 200
    token = response.json()["token"]

    response = await api.client.get(
        "/api/auth/me", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 200
    assert response.json()["user"]["username"] == "alice"


@pytest.mark.asyncio
async def test_register_duplicate_and_invalid(api):
    payload = {"username": "alice", "email": "alice@example.com", "password": "secret123"}
    await api.client.post("/api/auth/register", json=payload)

    response = await api.client.post("/api/auth/register", json=payload)

    assert response.status_code == 400
    assert response.json()["errors"] == [
        "username: Username is already taken",
        "email: Email is already registered",
    ]


@pytest.mark.asyncio
async def test_login_with_wrong_password(api):
    await api.create_user("alice")

    response = await api.client.post(
        "/api/auth/login", json={"email": "alice@example.com", "password": "wrong"}
    )

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Invalid credentials"}


@pytest.mark.asyncio
async def test_invalid_token(api):
    response = await api.client.get(
        "/api/auth/me", headers={"Authorization": "Bearer garbage"}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Token is not valid"


@pytest.mark.asyncio
async def test_comment_flow(api):
    editor = await api.create_user("editor", Role.EDITOR)
    reader = await api.create_user("reader")
    response = await api.client.post(
        "/api/posts",
        json={"title": "Hello", "body": "This is a test body."},
        headers={"Authorization": editor},
    )
    post_id = response.json()["post"]["id"]

    response = await api.client.post(
        "/api/comments",
        json={"postID": post_id, "comment": "First!"},
        headers={"Authorization": reader},
    )
    assert response.status_code == 201
    comment = response.json()["comment"]
    assert comment["text"] == "First!"
    assert comment["author"]["username"] == "reader"

    response = await api.client.put(
        f"/api/comments/{comment['id']}",
        json={"comment": "Hijacked"},
        headers={"Authorization": editor},
    )
    assert response.status_code == 403

    response = await api.client.put(
        f"/api/comments/{comment['id']}",
        json={"comment": "Edited"},
        headers={"Authorization": reader},
    )
    assert response.status_code == 200
    assert response.json()["comment"]["text"] == "Edited"

    response = await api.client.get(f"/api/comments/post/{post_id}")
    data = response.json()
    assert [c["text"] for c in data["comments"]] == ["Edited"]
    assert data["pagination"]["total_comments"] == 1

    response = await api.client.delete(
        f"/api/comments/{comment['id']}", headers={"Authorization": reader}
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Comment deleted successfully"


@pytest.mark.asyncio
async def test_comment_on_missing_post(api):
    reader = await api.create_user("reader")
    missing = str(uuid4())

    response = await api.client.post(
        "/api/comments",
        json={"postID": missing, "comment": "Hello?"},
        headers={"Authorization": reader},
    )
    assert response.status_code == 404

    response = await api.client.get(f"/api/comments/post/{missing}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_comment_without_content(api):
    reader = await api.create_user("reader")

    response = await api.client.post(
        "/api/comments", json={"postID": str(uuid4())}, headers={"Authorization": reader}
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Post ID and comment content are required"
