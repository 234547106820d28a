"""Create post use case."""

from uuid import uuid4

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from blog.application.usecase.common import PostItem
from blog.domain.error import ValidationError
from blog.domain.model import Post
from blog.domain.service import AuthService, PostService, ensure_can_author
from blog.domain.value import DEFAULT_CATEGORY, PostId


class CreatePostRequest(BaseModel):
    """Create post request."""

    authorization: str | None
    title: str | None = None
    body: str | None = None
    tags: list[str] | str | None = None  # List or comma separated
    category: str | None = None


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: PostItem


class CreatePostUseCase:
    """Use case for publishing a post.

    Only Admins and Editors may publish.
    """

    def __init__(self, auth_service: AuthService, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            auth_service: Auth domain service
            post_service: Post domain service
        """
        self.auth_service = auth_service
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Post fields and caller credentials

        Returns:
            The created post with its author's username

        Raises:
            AuthenticationError: If the caller is not authenticated
            ForbiddenError: If the caller's role may not author posts
            ValidationError: If any field is invalid
        """
        actor = await self.auth_service.authenticate(request.authorization)
        ensure_can_author(actor)

        try:
            post = Post(
                id=PostId(uuid4()),
                title=request.title or "",
                body=request.body or "",
                author_id=actor.user_id,
                tags=request.tags,
                category=request.category or DEFAULT_CATEGORY,
            )
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)

        saved = await self.post_service.save_post(post)
        return CreatePostResponse(post=PostItem.from_post(saved))
