"""Domain services."""

from .auth_service import AuthService
from .authorization import can_author, can_modify, ensure_can_author, ensure_can_modify
from .comment_service import CommentService
from .jwt_service import JWTService
from .post_service import PostService
from .query_builder import build_page_request, build_post_query
from .user_service import UserService

__all__ = [
    "AuthService",
    "CommentService",
    "JWTService",
    "PostService",
    "UserService",
    "build_page_request",
    "build_post_query",
    "can_author",
    "can_modify",
    "ensure_can_author",
    "ensure_can_modify",
]
