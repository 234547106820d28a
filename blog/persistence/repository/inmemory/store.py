"""Shared in-memory storage for the in-memory repositories."""

from dataclasses import dataclass, field

from blog.domain.model import Comment, Post, User
from blog.domain.value import CommentId, PostId, UserId


@dataclass
class InMemoryStore:
    """Rows held by the in-memory repositories.

    One store backs all repositories of a container, so data written in one
    request is visible to the next, like a database would be.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)

    def username_of(self, user_id: UserId) -> str | None:
        user = self.users.get(user_id)
        return user.username if user else None
