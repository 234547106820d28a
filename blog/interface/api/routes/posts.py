"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel

from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)


class PostAPIRequest(BaseModel):
    """API request for creating or updating a post.

    ``tags`` may be a list or a comma separated string.
    """

    title: str | None = None
    body: str | None = None
    tags: list[str] | str | None = None
    category: str | None = None


class ListPostsAPIResponse(ListPostsResponse):
    success: bool = True


class GetPostAPIResponse(GetPostResponse):
    success: bool = True


class CreatePostAPIResponse(CreatePostResponse):
    success: bool = True
    message: str = "Post created successfully"


class UpdatePostAPIResponse(UpdatePostResponse):
    success: bool = True
    message: str = "Post updated successfully"


class MessageResponse(BaseModel):
    success: bool = True
    message: str


@router.get("", response_model=ListPostsAPIResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: int = Query(default=1),
    limit: int = Query(default=10),
    category: str | None = Query(default=None),
    tag: str | None = Query(default=None),
    search: str | None = Query(default=None),
    sort_by: str | None = Query(default=None, alias="sortBy"),
    sort_order: str | None = Query(default=None, alias="sortOrder"),
) -> ListPostsAPIResponse:
    """List posts with filtering, search and pagination.

    Args:
        list_posts_use_case: List posts use case from DI
        page: 1-based page number
        limit: Page size (1-100)
        category: Category name, or ``all``
        tag: Only posts carrying this tag
        search: Free text search over title, body and tags
        sort_by: createdAt, updatedAt, title, views or category
        sort_order: asc or desc

    Returns:
        One page of posts with pagination metadata
    """
    result = await list_posts_use_case.execute(
        ListPostsRequest(
            page=page,
            limit=limit,
            category=category,
            tag=tag,
            search=search,
            sort_by=sort_by,
            sort_order=sort_order,
        )
    )
    return ListPostsAPIResponse(**result.model_dump())


@router.get("/{post_id}", response_model=GetPostAPIResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostAPIResponse:
    """Get a single post. Counts as one view."""
    result = await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    return GetPostAPIResponse(**result.model_dump())


@router.post(
    "", response_model=CreatePostAPIResponse, status_code=status.HTTP_201_CREATED
)
async def create_post(
    request: PostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    authorization: str | None = Header(default=None),
) -> CreatePostAPIResponse:
    """Create a new post.

    Requires an Admin or Editor.
    """
    result = await create_post_use_case.execute(
        CreatePostRequest(
            authorization=authorization,
            title=request.title,
            body=request.body,
            tags=request.tags,
            category=request.category,
        )
    )
    return CreatePostAPIResponse(**result.model_dump())


@router.put("/{post_id}", response_model=UpdatePostAPIResponse)
async def update_post(
    post_id: str,
    request: PostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    authorization: str | None = Header(default=None),
) -> UpdatePostAPIResponse:
    """Update a post.

    Only the post author or an Admin can edit. Omitted fields are unchanged.
    """
    result = await update_post_use_case.execute(
        UpdatePostRequest(
            authorization=authorization,
            post_id=post_id,
            title=request.title,
            body=request.body,
            tags=request.tags,
            category=request.category,
        )
    )
    return UpdatePostAPIResponse(**result.model_dump())


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    authorization: str | None = Header(default=None),
) -> MessageResponse:
    """Delete a post. Only the post author or an Admin can delete."""
    await delete_post_use_case.execute(
        DeletePostRequest(authorization=authorization, post_id=post_id)
    )
    return MessageResponse(message="Post deleted successfully")
