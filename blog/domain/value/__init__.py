"""Domain value objects for the blog."""

from blog.domain.value.identifiers import (
    CommentId,
    PostId,
    UserId,
    parse_comment_id,
    parse_post_id,
    parse_user_id,
)
from blog.domain.value.query import (
    PageRequest,
    Pagination,
    PostQuery,
    PostSort,
    SortDirection,
    SortField,
)
from blog.domain.value.types import (
    DEFAULT_CATEGORY,
    Category,
    Email,
    Role,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "parse_user_id",
    "parse_post_id",
    "parse_comment_id",
    # Types
    "Role",
    "Category",
    "DEFAULT_CATEGORY",
    "Username",
    "Email",
    # Queries
    "SortField",
    "SortDirection",
    "PageRequest",
    "PostSort",
    "PostQuery",
    "Pagination",
]
