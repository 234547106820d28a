"""Get post use case."""

from pydantic import BaseModel

from blog.application.usecase.common import PostItem
from blog.domain.service import PostService
from blog.domain.value import parse_post_id


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostItem


class GetPostUseCase:
    """Use case for reading a single post.

    Every successful read counts as one view.
    """

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            InvalidIdentifierError: If the id is malformed
            NotFoundError: If the post does not exist
        """
        post_id = parse_post_id(request.post_id)
        post = await self.post_service.record_view(post_id)
        return GetPostResponse(post=PostItem.from_post(post))
