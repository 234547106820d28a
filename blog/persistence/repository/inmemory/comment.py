"""In-memory comment repository for testing."""

from typing import Optional

from blog.domain.model.comment import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, PostId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _with_author(self, comment: Comment) -> Comment:
        return comment.model_copy(
            update={"author_username": self._store.username_of(comment.author_id)}
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        comment = self._store.comments.get(comment_id)
        return self._with_author(comment) if comment else None

    async def find_by_post(
        self,
        post_id: PostId,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments on a post, newest first."""
        comments = [c for c in self._store.comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: (c.created_at, str(c.id)), reverse=True)
        return [self._with_author(c) for c in comments[offset : offset + limit]]

    async def count_by_post(self, post_id: PostId) -> int:
        return sum(1 for c in self._store.comments.values() if c.post_id == post_id)

    async def save(self, comment: Comment) -> Comment:
        self._store.comments[comment.id] = comment
        return self._with_author(comment)

    async def delete(self, comment_id: CommentId) -> None:
        self._store.comments.pop(comment_id, None)
