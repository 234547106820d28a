"""List comments use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import CommentItem, CommentPagination
from blog.domain.service import CommentService, PostService, build_page_request
from blog.domain.value import Pagination, parse_post_id


class ListCommentsRequest(BaseModel):
    """List comments request."""

    post_id: str
    page: int = 1
    limit: int = 10


class ListCommentsResponse(BaseModel):
    """List comments response."""

    comments: list[CommentItem]
    pagination: CommentPagination


class ListCommentsUseCase:
    """Use case for listing the comments on a post, newest first."""

    def __init__(
        self, post_service: PostService, comment_service: CommentService
    ) -> None:
        """Initialize list comments use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Raises:
            InvalidIdentifierError: If the post id is malformed
            NotFoundError: If the post does not exist
            ValidationError: If page or limit is out of range
        """
        with logfire.span("list_comments.execute", post_id=request.post_id):
            post_id = parse_post_id(request.post_id)
            page = build_page_request(request.page, request.limit)

            await self.post_service.get_post_by_id(post_id)

            comments, total = await self.comment_service.list_comments(
                post_id, limit=page.limit, offset=page.offset
            )
            pagination = Pagination.from_total(page.page, page.limit, total)

            return ListCommentsResponse(
                comments=[CommentItem.from_comment(c) for c in comments],
                pagination=CommentPagination.from_pagination(pagination),
            )
