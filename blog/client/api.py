"""Async HTTP client for the blog API."""

from typing import Any

import httpx
import logfire

from blog.client.config import ClientConfig
from blog.client.error import APIError, SessionExpiredError
from blog.client.session import SessionStore


class BearerAuth(httpx.Auth):
    """Attach the stored session token, if any, to every request."""

    def __init__(self, store: SessionStore) -> None:
        self.store = store

    def auth_flow(self, request: httpx.Request):
        token = self.store.token
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        yield request


class BlogClient:
    """Client for the blog REST API.

    A 401 from any endpoint clears the stored token and raises
    SessionExpiredError; the caller should send the user to log in again.

    Usage:
        async with BlogClient(ClientConfig(), SessionStore("~/.blog.json")) as api:
            await api.login("alice@example.com", "secret")
            page = await api.list_posts(category="Technology")
    """

    def __init__(
        self,
        config: ClientConfig,
        store: SessionStore,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Base URL and timeout
            store: Where the session token is kept
            transport: Custom transport (tests use httpx.MockTransport)
        """
        self.config = config
        self.store = store
        self._http = httpx.AsyncClient(
            base_url=config.base_url.rstrip("/") + "/",
            timeout=config.timeout,
            auth=BearerAuth(store),
            transport=transport,
        )

    async def __aenter__(self) -> "BlogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.aclose()

    async def _request(
        self, method: str, path: str, session: bool = True, **kwargs: Any
    ) -> dict:
        """Send a request and return its JSON body.

        A 401 on a session request clears the stored token and raises
        SessionExpiredError. Credential requests (``session=False``) raise a
        plain APIError instead.
        """
        with logfire.span("blog_client.request", method=method, path=path):
            response = await self._http.request(method, path.lstrip("/"), **kwargs)

            try:
                data = response.json()
            except ValueError:
                data = {}

            if response.status_code == 401 and session:
                self.store.clear_token()
                logfire.info("Session rejected by API, token cleared")
                raise SessionExpiredError(
                    401, data.get("message", "Session expired"), data.get("errors")
                )

            if response.is_error:
                raise APIError(
                    response.status_code,
                    data.get("message", response.reason_phrase),
                    data.get("errors"),
                )

            return data

    # Auth
    async def register(self, username: str, email: str, password: str) -> dict:
        """Register and keep the returned session token."""
        data = await self._request(
            "POST",
            "auth/register",
            session=False,
            json={"username": username, "email": email, "password": password},
        )
        self.store.set_token(data["token"])
        return data["user"]

    async def login(self, email: str, password: str) -> dict:
        """Log in and keep the returned session token."""
        data = await self._request(
            "POST",
            "auth/login",
            session=False,
            json={"email": email, "password": password},
        )
        self.store.set_token(data["token"])
        return data["user"]

    def logout(self) -> None:
        self.store.clear_token()

    async def me(self) -> dict:
        data = await self._request("GET", "auth/me")
        return data["user"]

    # Posts
    async def list_posts(
        self,
        page: int = 1,
        limit: int = 10,
        category: str | None = None,
        tag: str | None = None,
        search: str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> dict:
        """List posts; returns ``{"posts": [...], "pagination": {...}}``."""
        params = {
            "page": page,
            "limit": limit,
            "category": category,
            "tag": tag,
            "search": search,
            "sortBy": sort_by,
            "sortOrder": sort_order,
        }
        data = await self._request(
            "GET",
            "posts",
            params={k: v for k, v in params.items() if v is not None},
        )
        return {"posts": data["posts"], "pagination": data["pagination"]}

    async def get_post(self, post_id: str) -> dict:
        data = await self._request("GET", f"posts/{post_id}")
        return data["post"]

    async def create_post(
        self,
        title: str,
        body: str,
        tags: list[str] | str | None = None,
        category: str | None = None,
    ) -> dict:
        payload: dict[str, Any] = {"title": title, "body": body}
        if tags is not None:
            payload["tags"] = tags
        if category is not None:
            payload["category"] = category
        data = await self._request("POST", "posts", json=payload)
        return data["post"]

    async def update_post(self, post_id: str, **changes: Any) -> dict:
        """Update a post; pass only the fields to change."""
        data = await self._request("PUT", f"posts/{post_id}", json=changes)
        return data["post"]

    async def delete_post(self, post_id: str) -> None:
        await self._request("DELETE", f"posts/{post_id}")

    # Comments
    async def list_comments(self, post_id: str, page: int = 1, limit: int = 10) -> dict:
        data = await self._request(
            "GET", f"comments/post/{post_id}", params={"page": page, "limit": limit}
        )
        return {"comments": data["comments"], "pagination": data["pagination"]}

    async def create_comment(self, post_id: str, text: str) -> dict:
        data = await self._request(
            "POST", "comments", json={"postID": post_id, "comment": text}
        )
        return data["comment"]

    async def update_comment(self, comment_id: str, text: str) -> dict:
        data = await self._request(
            "PUT", f"comments/{comment_id}", json={"comment": text}
        )
        return data["comment"]

    async def delete_comment(self, comment_id: str) -> None:
        await self._request("DELETE", f"comments/{comment_id}")
