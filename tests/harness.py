"""Test harness for unit, integration and E2E tests.

Settings are loaded from environment variables (configure via .env or export).
"""

from dataclasses import dataclass

import httpx
import pytest_asyncio
from dishka import AsyncContainer

from blog.domain.service import UserService
from blog.domain.value import Role
from blog.interface.api.app import create_app
from blog.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            repo = await unit_env.get(PostRepository)
            post = await repo.save(Post(...))
            assert post.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


@dataclass
class ApiEnv:
    """HTTP client bound to an app, plus the container behind it."""

    client: httpx.AsyncClient
    container: AsyncContainer

    async def create_user(
        self, username: str, role: Role = Role.USER, password: str = "secret123"
    ) -> str:
        """Register a user directly with the given role and log them in.

        Returns:
            Authorization header value for the user
        """
        async with self.container() as request_container:
            user_service = await request_container.get(UserService)
            await user_service.register(
                username, f"{username}@example.com", password, role=role
            )

        response = await self.client.post(
            "/api/auth/login",
            json={"email": f"{username}@example.com", "password": password},
        )
        response.raise_for_status()
        return f"Bearer {response.json()['token']}"


def create_api_fixture(unmock: set[Component] | None = None):
    """Factory for fixtures that serve the full app over ``httpx.ASGITransport``.

    Usage:
        api = create_api_fixture()

        @pytest.mark.asyncio
        async def test_health(api):
            response = await api.client.get("/health")
            assert response.status_code == 200
    """

    @pytest_asyncio.fixture
    async def _api_environment():
        container = build_test_container(unmock=unmock or set())
        app = create_app(container)
        transport = httpx.ASGITransport(app=app)

        async with httpx.AsyncClient(
            transport=transport, base_url="http://test"
        ) as client:
            yield ApiEnv(client=client, container=container)

        await container.close()

    return _api_environment
