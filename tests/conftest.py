"""Test configuration and fixtures."""

from uuid import uuid4

import logfire
import pytest

from blog.domain.model import AuthenticatedUser, Post, User
from blog.domain.repository import UserRepository
from blog.domain.service import AuthService
from blog.domain.value import Category, PostId, Role, UserId
from blog.util.password import PasswordHasher

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)

TEST_PASSWORD = "secret123"
_TEST_PASSWORD_HASH = PasswordHasher.hash(TEST_PASSWORD)


def make_user(
    username: str = "alice",
    role: Role = Role.USER,
    email: str | None = None,
) -> User:
    """Build a user whose password is TEST_PASSWORD."""
    return User(
        id=UserId(uuid4()),
        username=username,
        email=email or f"{username}@example.com",
        password_hash=_TEST_PASSWORD_HASH,
        role=role,
    )


def make_post(
    author: User,
    title: str = "Hello",
    body: str = "This is a test body.",
    tags: list[str] | None = None,
    category: Category = Category.GENERAL,
) -> Post:
    """Build a valid post authored by ``author``."""
    return Post(
        id=PostId(uuid4()),
        title=title,
        body=body,
        author_id=author.id,
        tags=tags or [],
        category=category,
    )


def as_actor(user: User) -> AuthenticatedUser:
    return AuthenticatedUser(user_id=user.id, username=user.username, role=user.role)


@pytest.fixture
def admin() -> User:
    return make_user("admin", Role.ADMIN)


@pytest.fixture
def editor() -> User:
    return make_user("editor", Role.EDITOR)


@pytest.fixture
def reader() -> User:
    return make_user("reader", Role.USER)


async def seed_user(env, user: User) -> str:
    """Store ``user`` and return an Authorization header value for them."""
    repository = await env.get(UserRepository)
    await repository.save(user)
    auth_service = await env.get(AuthService)
    return f"Bearer {auth_service.issue_token(user)}"
