"""Update post use case."""

from datetime import datetime

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from blog.application.usecase.common import PostItem
from blog.domain.error import ValidationError
from blog.domain.model import Post
from blog.domain.service import (
    AuthService,
    PostService,
    ensure_can_author,
    ensure_can_modify,
)
from blog.domain.value import parse_post_id


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields left as None keep their stored value.
    """

    authorization: str | None
    post_id: str
    title: str | None = None
    body: str | None = None
    tags: list[str] | str | None = None
    category: str | None = None


class UpdatePostResponse(BaseModel):
    """Update post response."""

    post: PostItem


class UpdatePostUseCase:
    """Use case for editing a post.

    The caller must be allowed to author posts and must own the post,
    unless they are an Admin.
    """

    def __init__(self, auth_service: AuthService, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            auth_service: Auth domain service
            post_service: Post domain service
        """
        self.auth_service = auth_service
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Post ID, changed fields and caller credentials

        Returns:
            Updated post details

        Raises:
            AuthenticationError: If the caller is not authenticated
            ForbiddenError: If the caller may not edit this post
            InvalidIdentifierError: If the post id is malformed
            NotFoundError: If the post does not exist
            ValidationError: If the merged post is invalid
        """
        actor = await self.auth_service.authenticate(request.authorization)
        ensure_can_author(actor)

        post_id = parse_post_id(request.post_id)
        post = await self.post_service.get_post_by_id(post_id)
        ensure_can_modify(actor, post.author_id)

        changes = request.model_dump(
            include={"title", "body", "tags", "category"}, exclude_none=True
        )
        try:
            updated = Post.model_validate(
                {**post.model_dump(), **changes, "updated_at": datetime.now()}
            )
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)

        saved = await self.post_service.save_post(updated)
        return UpdatePostResponse(post=PostItem.from_post(saved))
