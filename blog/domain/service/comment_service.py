"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from blog.domain.error import NotFoundError, ValidationError
from blog.domain.model.comment import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, PostId, UserId


class CommentService:
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self, post_id: PostId, author_id: UserId, text: str
    ) -> Comment:
        """Create a comment on a post.

        The caller is responsible for checking that the post exists.

        Args:
            post_id: Post ID
            author_id: Author user ID
            text: Comment text, trimmed before it is stored

        Returns:
            Created comment

        Raises:
            ValidationError: If the text is blank or too long
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
        ):
            try:
                comment = Comment(
                    id=CommentId(uuid4()),
                    post_id=post_id,
                    author_id=author_id,
                    text=text,
                )
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created", comment_id=str(saved.id), post_id=str(post_id)
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("comment", str(comment_id))
            return comment

    async def list_comments(
        self, post_id: PostId, limit: int, offset: int
    ) -> tuple[list[Comment], int]:
        """List one page of a post's comments, newest first.

        Returns:
            The page of comments and the total number on the post
        """
        with logfire.span(
            "comment_service.list_comments",
            post_id=str(post_id),
            limit=limit,
            offset=offset,
        ):
            comments = await self.comment_repository.find_by_post(
                post_id, limit=limit, offset=offset
            )
            total = await self.comment_repository.count_by_post(post_id)
            return comments, total

    async def update_text(self, comment: Comment, text: str) -> Comment:
        """Replace a comment's text.

        Args:
            comment: Existing comment
            text: New text, trimmed and validated again

        Returns:
            Updated comment

        Raises:
            ValidationError: If the text is blank or too long
        """
        with logfire.span(
            "comment_service.update_text", comment_id=str(comment.id)
        ):
            try:
                updated = Comment.model_validate(
                    {
                        **comment.model_dump(),
                        "text": text,
                        "updated_at": datetime.now(),
                    }
                )
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.comment_repository.save(updated)
            logfire.info("Comment updated", comment_id=str(saved.id))
            return saved

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        with logfire.span(
            "comment_service.delete_comment", comment_id=str(comment_id)
        ):
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))
