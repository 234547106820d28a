"""Create comment use case."""

from pydantic import BaseModel

from blog.application.usecase.common import CommentItem
from blog.domain.error import ValidationError
from blog.domain.service import AuthService, CommentService, PostService
from blog.domain.value import parse_post_id


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    authorization: str | None
    post_id: str | None = None
    text: str | None = None


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for commenting on a post.

    Any authenticated user may comment on an existing post.
    """

    def __init__(
        self,
        auth_service: AuthService,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            auth_service: Auth domain service
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.auth_service = auth_service
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Post ID, comment text and caller credentials

        Returns:
            Created comment with its author's username

        Raises:
            AuthenticationError: If the caller is not authenticated
            ValidationError: If post ID or text is missing, or text is too long
            InvalidIdentifierError: If the post id is malformed
            NotFoundError: If the post does not exist; nothing is written
        """
        actor = await self.auth_service.authenticate(request.authorization)

        if not request.post_id or not request.text or not request.text.strip():
            raise ValidationError(
                [], message="Post ID and comment content are required"
            )

        post_id = parse_post_id(request.post_id)
        await self.post_service.get_post_by_id(post_id)

        comment = await self.comment_service.create_comment(
            post_id=post_id, author_id=actor.user_id, text=request.text
        )
        return CreateCommentResponse(comment=CommentItem.from_comment(comment))
