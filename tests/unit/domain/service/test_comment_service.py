"""Unit tests for CommentService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from blog.domain.error import NotFoundError, ValidationError
from blog.domain.model import Comment
from blog.domain.repository import CommentRepository, UserRepository
from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_create_trims_text_and_joins_author(unit_env):
    author = make_user("commenter")
    await (await unit_env.get(UserRepository)).save(author)
    comment_service = await unit_env.get(CommentService)

    comment = await comment_service.create_comment(
        PostId(uuid4()), author.id, "  Great post!  "
    )

    assert comment.text == "Great post!"
    assert comment.author_username == "commenter"


@pytest.mark.asyncio
async def test_create_rejects_long_text(unit_env):
    comment_service = await unit_env.get(CommentService)

    with pytest.raises(ValidationError):
        await comment_service.create_comment(
            PostId(uuid4()), make_user().id, "x" * 1001
        )


@pytest.mark.asyncio
async def test_list_is_newest_first(unit_env):
    post_id = PostId(uuid4())
    author = make_user()
    repository = await unit_env.get(CommentRepository)
    start = datetime(2024, 1, 1, 12, 0)
    for minute, text in enumerate(["first", "second", "third"]):
        stamp = start + timedelta(minutes=minute)
        await repository.save(
            Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author.id,
                text=text,
                created_at=stamp,
                updated_at=stamp,
            )
        )
    comment_service = await unit_env.get(CommentService)

    comments, total = await comment_service.list_comments(post_id, limit=2, offset=0)

    assert total == 3
    assert [c.text for c in comments] == ["third", "second"]


@pytest.mark.asyncio
async def test_update_text(unit_env):
    comment_service = await unit_env.get(CommentService)
    comment = await comment_service.create_comment(
        PostId(uuid4()), make_user().id, "before"
    )

    updated = await comment_service.update_text(comment, " after ")

    assert updated.text == "after"
    assert updated.created_at == comment.created_at
    assert updated.updated_at >= comment.updated_at


@pytest.mark.asyncio
async def test_get_comment_not_found(unit_env):
    comment_service = await unit_env.get(CommentService)

    with pytest.raises(NotFoundError, match="Comment not found"):
        await comment_service.get_comment_by_id(CommentId(uuid4()))


@pytest.mark.asyncio
async def test_delete_comment(unit_env):
    comment_service = await unit_env.get(CommentService)
    comment = await comment_service.create_comment(
        PostId(uuid4()), make_user().id, "bye"
    )

    await comment_service.delete_comment(comment.id)

    with pytest.raises(NotFoundError):
        await comment_service.get_comment_by_id(comment.id)
