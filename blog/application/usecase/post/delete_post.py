"""Delete post use case."""

from pydantic import BaseModel

from blog.domain.service import (
    AuthService,
    PostService,
    ensure_can_author,
    ensure_can_modify,
)
from blog.domain.value import parse_post_id


class DeletePostRequest(BaseModel):
    """Delete post request."""

    authorization: str | None
    post_id: str


class DeletePostUseCase:
    """Use case for deleting a post.

    The post's comments are left in place.
    """

    def __init__(self, auth_service: AuthService, post_service: PostService) -> None:
        self.auth_service = auth_service
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Raises:
            AuthenticationError: If the caller is not authenticated
            ForbiddenError: If the caller may not delete this post
            InvalidIdentifierError: If the post id is malformed
            NotFoundError: If the post does not exist
        """
        actor = await self.auth_service.authenticate(request.authorization)
        ensure_can_author(actor)

        post_id = parse_post_id(request.post_id)
        post = await self.post_service.get_post_by_id(post_id)
        ensure_can_modify(actor, post.author_id)

        await self.post_service.delete_post(post_id)
