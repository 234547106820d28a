"""Response items shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model import Comment, Post, User
from blog.domain.value import Category, Pagination, Role


class UserInfo(BaseModel):
    """Public view of a user account."""

    id: str
    username: str
    email: str
    role: Role
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            username=user.username,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
        )


class AuthorInfo(BaseModel):
    """Author reference embedded in posts and comments."""

    id: str
    username: str | None


class PostItem(BaseModel):
    """Post as returned by the API."""

    id: str
    title: str
    body: str
    author: AuthorInfo
    tags: list[str]
    category: Category
    views: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostItem":
        return cls(
            id=str(post.id),
            title=post.title,
            body=post.body,
            author=AuthorInfo(id=str(post.author_id), username=post.author_username),
            tags=list(post.tags),
            category=post.category,
            views=post.views,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class CommentItem(BaseModel):
    """Comment as returned by the API."""

    id: str
    post_id: str
    author: AuthorInfo
    text: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            author=AuthorInfo(
                id=str(comment.author_id), username=comment.author_username
            ),
            text=comment.text,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class PostPagination(BaseModel):
    """Pagination block of a post listing."""

    current_page: int
    total_pages: int
    total_posts: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def from_pagination(cls, pagination: Pagination) -> "PostPagination":
        return cls(
            current_page=pagination.current_page,
            total_pages=pagination.total_pages,
            total_posts=pagination.total,
            has_next_page=pagination.has_next_page,
            has_prev_page=pagination.has_prev_page,
        )


class CommentPagination(BaseModel):
    """Pagination block of a comment listing."""

    current_page: int
    total_pages: int
    total_comments: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def from_pagination(cls, pagination: Pagination) -> "CommentPagination":
        return cls(
            current_page=pagination.current_page,
            total_pages=pagination.total_pages,
            total_comments=pagination.total,
            has_next_page=pagination.has_next_page,
            has_prev_page=pagination.has_prev_page,
        )
