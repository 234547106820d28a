"""Unit tests for CreatePostUseCase."""

import pytest

from blog.application.usecase.post import CreatePostRequest, CreatePostUseCase
from blog.domain.error import ForbiddenError, UnauthenticatedError, ValidationError
from blog.domain.service import PostService, build_post_query
from blog.domain.value import Category, Role
from tests.conftest import make_user, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _stored_posts(env):
    post_service = await env.get(PostService)
    posts, _ = await post_service.list_posts(build_post_query())
    return posts


@pytest.mark.asyncio
@pytest.mark.parametrize("role", [Role.ADMIN, Role.EDITOR])
async def test_authors_can_create(unit_env, role):
    header = await seed_user(unit_env, make_user("author", role))
    use_case = await unit_env.get(CreatePostUseCase)

    response = await use_case.execute(
        CreatePostRequest(
            authorization=header,
            title="  Hello  ",
            body="This is a test body.",
            tags="a, b, b",
        )
    )

    post = response.post
    assert post.title == "Hello"
    assert post.category == Category.GENERAL
    assert post.tags == ["a", "b", "b"]
    assert post.views == 0
    assert post.author.username == "author"


@pytest.mark.asyncio
async def test_user_role_is_forbidden(unit_env):
    header = await seed_user(unit_env, make_user("reader", Role.USER))
    use_case = await unit_env.get(CreatePostUseCase)

    with pytest.raises(ForbiddenError):
        await use_case.execute(
            CreatePostRequest(
                authorization=header, title="Hello", body="This is a test body."
            )
        )

    assert await _stored_posts(unit_env) == []


@pytest.mark.asyncio
async def test_requires_authentication(unit_env):
    use_case = await unit_env.get(CreatePostUseCase)

    with pytest.raises(UnauthenticatedError):
        await use_case.execute(
            CreatePostRequest(
                authorization=None, title="Hello", body="This is a test body."
            )
        )


@pytest.mark.asyncio
async def test_invalid_fields_are_all_reported(unit_env):
    header = await seed_user(unit_env, make_user("author", Role.EDITOR))
    use_case = await unit_env.get(CreatePostUseCase)

    with pytest.raises(ValidationError) as exc_info:
        await use_case.execute(
            CreatePostRequest(
                authorization=header, title="", body="short", category="Cooking"
            )
        )

    errors = exc_info.value.errors
    assert "title: Title is required" in errors
    assert "body: Body must be at least 10 characters long" in errors
    assert any(e.startswith("category:") for e in errors)
    assert await _stored_posts(unit_env) == []
