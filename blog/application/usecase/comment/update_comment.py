"""Update comment use case."""

from pydantic import BaseModel

from blog.application.usecase.common import CommentItem
from blog.domain.error import ValidationError
from blog.domain.service import AuthService, CommentService, ensure_can_modify
from blog.domain.value import parse_comment_id


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    authorization: str | None
    comment_id: str
    text: str | None = None


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase:
    """Use case for editing a comment (author or Admin)."""

    def __init__(
        self, auth_service: AuthService, comment_service: CommentService
    ) -> None:
        """Initialize update comment use case.

        Args:
            auth_service: Auth domain service
            comment_service: Comment domain service
        """
        self.auth_service = auth_service
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            AuthenticationError: If the caller is not authenticated
            ValidationError: If the new text is blank or too long
            InvalidIdentifierError: If the comment id is malformed
            NotFoundError: If the comment does not exist
            ForbiddenError: If the caller is neither author nor Admin
        """
        actor = await self.auth_service.authenticate(request.authorization)

        if not request.text or not request.text.strip():
            raise ValidationError([], message="Comment content is required")

        comment_id = parse_comment_id(request.comment_id)
        comment = await self.comment_service.get_comment_by_id(comment_id)
        ensure_can_modify(actor, comment.author_id)

        updated = await self.comment_service.update_text(comment, request.text)
        return UpdateCommentResponse(comment=CommentItem.from_comment(updated))
