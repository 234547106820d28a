"""Unit tests for the API client against a mocked transport."""

import json

import httpx
import pytest

from blog.client import (
    APIError,
    BlogClient,
    ClientConfig,
    SessionExpiredError,
    SessionStore,
)


@pytest.fixture
def store(tmp_path) -> SessionStore:
    return SessionStore(tmp_path / "session.json")


def _client(store: SessionStore, handler) -> BlogClient:
    return BlogClient(
        ClientConfig(base_url="http://blog.test/api"),
        store,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_login_stores_token_and_sends_it(store):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path == "/api/auth/login":
            return httpx.Response(
                200,
                json={"success": True, "token": "tok-1", "user": {"username": "alice"}},
            )
        return httpx.Response(200, json={"success": True, "user": {"username": "alice"}})

    async with _client(store, handler) as client:
        user = await client.login("alice@example.com", "secret123")
        await client.me()

    assert user["username"] == "alice"
    assert store.token == "tok-1"
    assert "Authorization" not in seen[0].headers
    assert json.loads(seen[0].content) == {
        "email": "alice@example.com",
        "password": "secret123",
    }
    assert seen[1].headers["Authorization"] == "Bearer tok-1"


@pytest.mark.asyncio
async def test_401_clears_token(store):
    store.set_token("stale")

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"success": False, "message": "Token is not valid"})

    async with _client(store, handler) as client:
        with pytest.raises(SessionExpiredError) as exc_info:
            await client.me()

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Token is not valid"
    assert store.token is None


@pytest.mark.asyncio
async def test_rejected_login_is_not_a_session_expiry(store):
    store.set_token("previous")

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            401, json={"success": False, "message": "Invalid credentials"}
        )

    async with _client(store, handler) as client:
        with pytest.raises(APIError) as exc_info:
            await client.login("alice@example.com", "wrong-password")

    assert not isinstance(exc_info.value, SessionExpiredError)
    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Invalid credentials"
    assert store.token == "previous"


@pytest.mark.asyncio
async def test_other_errors_keep_token(store):
    store.set_token("good")

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            400,
            json={
                "success": False,
                "message": "Validation error",
                "errors": ["title: Title is required"],
            },
        )

    async with _client(store, handler) as client:
        with pytest.raises(APIError) as exc_info:
            await client.create_post("", "This is a test body.")

    assert exc_info.value.status_code == 400
    assert exc_info.value.errors == ["title: Title is required"]
    assert store.token == "good"


@pytest.mark.asyncio
async def test_list_posts_sends_camel_case_params(store):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"success": True, "posts": [], "pagination": {}})

    async with _client(store, handler) as client:
        result = await client.list_posts(category="Technology", sort_by="views")

    params = seen[0].url.params
    assert params["category"] == "Technology"
    assert params["sortBy"] == "views"
    assert "tag" not in params
    assert result == {"posts": [], "pagination": {}}


@pytest.mark.asyncio
async def test_create_comment_payload(store):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"success": True, "comment": {"text": "hi"}})

    async with _client(store, handler) as client:
        await client.create_comment("post-1", "hi")

    assert seen[0].url.path == "/api/comments"
    assert json.loads(seen[0].content) == {"postID": "post-1", "comment": "hi"}


@pytest.mark.asyncio
async def test_logout_clears_token(store):
    store.set_token("tok")

    async with _client(store, lambda request: httpx.Response(200, json={})) as client:
        client.logout()

    assert store.token is None
