"""List posts use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import PostItem, PostPagination
from blog.domain.service import PostService, build_post_query
from blog.domain.value import Pagination


class ListPostsRequest(BaseModel):
    """List posts request.

    Values are passed through as received; the query builder validates them.
    """

    page: int = 1
    limit: int = 10
    category: str | None = None
    tag: str | None = None
    search: str | None = None
    sort_by: str | None = None
    sort_order: str | None = None


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    pagination: PostPagination


class ListPostsUseCase:
    """Use case for listing posts with filtering, search and pagination."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Filters, sort and page window

        Returns:
            One page of posts and its pagination metadata

        Raises:
            ValidationError: If any parameter is out of range
        """
        with logfire.span("list_posts.execute", page=request.page, limit=request.limit):
            query = build_post_query(
                category=request.category,
                tag=request.tag,
                search=request.search,
                page=request.page,
                limit=request.limit,
                sort_by=request.sort_by,
                sort_order=request.sort_order,
            )
            posts, total = await self.post_service.list_posts(query)
            pagination = Pagination.from_total(
                query.page.page, query.page.limit, total
            )

            return ListPostsResponse(
                posts=[PostItem.from_post(post) for post in posts],
                pagination=PostPagination.from_pagination(pagination),
            )
