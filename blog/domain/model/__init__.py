"""Domain model entities for the blog."""

from blog.domain.model.comment import Comment
from blog.domain.model.post import Post
from blog.domain.model.user import AuthenticatedUser, User

__all__ = [
    "User",
    "AuthenticatedUser",
    "Post",
    "Comment",
]
