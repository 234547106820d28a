"""Delete comment use case."""

from pydantic import BaseModel

from blog.domain.service import AuthService, CommentService, ensure_can_modify
from blog.domain.value import parse_comment_id


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    authorization: str | None
    comment_id: str


class DeleteCommentUseCase:
    """Use case for deleting a comment (author or Admin)."""

    def __init__(
        self, auth_service: AuthService, comment_service: CommentService
    ) -> None:
        self.auth_service = auth_service
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        actor = await self.auth_service.authenticate(request.authorization)

        comment_id = parse_comment_id(request.comment_id)
        comment = await self.comment_service.get_comment_by_id(comment_id)
        ensure_can_modify(actor, comment.author_id)

        await self.comment_service.delete_comment(comment_id)
