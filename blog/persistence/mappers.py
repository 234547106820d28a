"""Row to domain model conversion.

Tables are SQLAlchemy Core only; each function builds a frozen pydantic model
from a result row, or the insert/update values for one.
"""

from typing import Any, Dict
from uuid import UUID

from blog.domain.model import Comment, Post, User
from blog.domain.value import Category, CommentId, PostId, Role, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict, optionally with a joined ``author_username``

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        body=row["body"],
        author_id=UserId(_uuid(row["author_id"])),
        author_username=row.get("author_username"),
        tags=list(row.get("tags") or []),
        category=Category(row["category"]),
        views=row["views"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    ``author_username`` is excluded; it lives on the users table.
    """
    data = post.model_dump(exclude={"author_username"})
    data["category"] = post.category.value
    return data


def post_search_document(post: Post) -> str:
    """Text indexed for full-text search: title, body and tags."""
    return " ".join([post.title, post.body, *post.tags])


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=row.get("author_username"),
        text=row["text"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump(exclude={"author_username"})
