"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import AliasChoices, BaseModel, Field

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

router = APIRouter(prefix="/api/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    post_id: str | None = Field(
        default=None, validation_alias=AliasChoices("postID", "postId", "post_id")
    )
    comment: str | None = None


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    comment: str | None = None


class ListCommentsAPIResponse(ListCommentsResponse):
    success: bool = True


class CreateCommentAPIResponse(CreateCommentResponse):
    success: bool = True
    message: str = "Comment added successfully"


class UpdateCommentAPIResponse(UpdateCommentResponse):
    success: bool = True
    message: str = "Comment updated successfully"


class MessageResponse(BaseModel):
    success: bool = True
    message: str


@router.get("/post/{post_id}", response_model=ListCommentsAPIResponse)
async def list_comments(
    post_id: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    page: int = Query(default=1),
    limit: int = Query(default=10),
) -> ListCommentsAPIResponse:
    """List the comments on a post, newest first."""
    result = await list_comments_use_case.execute(
        ListCommentsRequest(post_id=post_id, page=page, limit=limit)
    )
    return ListCommentsAPIResponse(**result.model_dump())


@router.post(
    "", response_model=CreateCommentAPIResponse, status_code=status.HTTP_201_CREATED
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    authorization: str | None = Header(default=None),
) -> CreateCommentAPIResponse:
    """Comment on a post.

    Requires authentication.

    Args:
        request: Target post ID and comment text
        create_comment_use_case: Create comment use case from DI
        authorization: Bearer token

    Returns:
        Created comment details
    """
    result = await create_comment_use_case.execute(
        CreateCommentRequest(
            authorization=authorization,
            post_id=request.post_id,
            text=request.comment,
        )
    )
    return CreateCommentAPIResponse(**result.model_dump())


@router.put("/{comment_id}", response_model=UpdateCommentAPIResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    authorization: str | None = Header(default=None),
) -> UpdateCommentAPIResponse:
    """Edit a comment. Only the comment author or an Admin can edit."""
    result = await update_comment_use_case.execute(
        UpdateCommentRequest(
            authorization=authorization,
            comment_id=comment_id,
            text=request.comment,
        )
    )
    return UpdateCommentAPIResponse(**result.model_dump())


@router.delete("/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    authorization: str | None = Header(default=None),
) -> MessageResponse:
    """Delete a comment. Only the comment author or an Admin can delete."""
    await delete_comment_use_case.execute(
        DeleteCommentRequest(authorization=authorization, comment_id=comment_id)
    )
    return MessageResponse(message="Comment deleted successfully")
