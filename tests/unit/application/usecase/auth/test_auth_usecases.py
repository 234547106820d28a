"""Unit tests for the register, login and current user use cases."""

import pytest

from blog.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from blog.domain.error import (
    InvalidTokenError,
    UnauthenticatedError,
    ValidationError,
)
from blog.domain.value import Role
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _register(env, username="alice", email="alice@example.com"):
    use_case = await env.get(RegisterUseCase)
    return await use_case.execute(
        RegisterRequest(username=username, email=email, password="secret123")
    )


@pytest.mark.asyncio
async def test_register_issues_token_with_user_role(unit_env):
    response = await _register(unit_env)

    assert response.token
    assert response.user.username == "alice"
    assert response.user.role == Role.USER


@pytest.mark.asyncio
async def test_register_duplicate(unit_env):
    await _register(unit_env)

    with pytest.raises(ValidationError):
        await _register(unit_env, username="alice", email="other@example.com")


@pytest.mark.asyncio
async def test_login_then_me(unit_env):
    await _register(unit_env)
    login = await unit_env.get(LoginUseCase)

    logged_in = await login.execute(
        LoginRequest(email="alice@example.com", password="secret123")
    )

    me = await unit_env.get(GetCurrentUserUseCase)
    response = await me.execute(
        GetCurrentUserRequest(authorization=f"Bearer {logged_in.token}")
    )
    assert response.user.username == "alice"
    assert response.user.email == "alice@example.com"


@pytest.mark.asyncio
async def test_login_wrong_password(unit_env):
    await _register(unit_env)
    login = await unit_env.get(LoginUseCase)

    with pytest.raises(UnauthenticatedError):
        await login.execute(LoginRequest(email="alice@example.com", password="nope"))


@pytest.mark.asyncio
async def test_me_with_tampered_token(unit_env):
    registered = await _register(unit_env)
    me = await unit_env.get(GetCurrentUserUseCase)

    with pytest.raises(InvalidTokenError):
        await me.execute(
            GetCurrentUserRequest(authorization=f"Bearer {registered.token}x")
        )
