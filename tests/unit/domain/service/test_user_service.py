"""Unit tests for UserService."""

import pytest

from blog.domain.error import NotFoundError, ValidationError
from blog.domain.service import UserService
from blog.domain.value import Role
from blog.util.password import PasswordHasher
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_register_creates_user(unit_env):
    user_service = await unit_env.get(UserService)

    user = await user_service.register("alice", "Alice@Example.com", "secret123")

    assert user.username == "alice"
    assert user.email == "alice@example.com"
    assert user.role == Role.USER
    assert user.password_hash != "secret123"
    assert PasswordHasher.verify("secret123", user.password_hash)
    assert (await user_service.get_by_id(user.id)).id == user.id


@pytest.mark.asyncio
async def test_register_with_role(unit_env):
    user_service = await unit_env.get(UserService)

    user = await user_service.register(
        "boss", "boss@example.com", "secret123", role=Role.ADMIN
    )

    assert user.role == Role.ADMIN


@pytest.mark.asyncio
async def test_register_reports_every_invalid_field(unit_env):
    user_service = await unit_env.get(UserService)

    with pytest.raises(ValidationError) as exc_info:
        await user_service.register("a!", "not-an-email", "123")

    errors = exc_info.value.errors
    assert len(errors) == 3
    assert errors[0].startswith("username:")
    assert errors[1].startswith("email:")
    assert errors[2] == "password: Password must be at least 6 characters"


@pytest.mark.asyncio
async def test_register_rejects_duplicates(unit_env):
    user_service = await unit_env.get(UserService)
    await user_service.register("alice", "alice@example.com", "secret123")

    with pytest.raises(ValidationError) as exc_info:
        await user_service.register("alice", "ALICE@example.com", "secret123")

    assert exc_info.value.errors == [
        "username: Username is already taken",
        "email: Email is already registered",
    ]


@pytest.mark.asyncio
async def test_get_by_id_not_found(unit_env):
    user_service = await unit_env.get(UserService)

    with pytest.raises(NotFoundError) as exc_info:
        await user_service.get_by_id(make_user().id)
    assert str(exc_info.value) == "User not found"
