"""Comment entity.

Comments belong to a post and are listed newest first. They are not removed
when their post is deleted.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, PostId, UserId

TEXT_MAX_LENGTH = 1000


class Comment(DomainModel):
    """Comment entity."""

    id: CommentId
    post_id: PostId
    author_id: UserId
    author_username: Optional[str] = None  # Joined from users on reads
    text: str
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Comment cannot be empty")
        if len(v) > TEXT_MAX_LENGTH:
            raise ValueError(f"Comment cannot exceed {TEXT_MAX_LENGTH} characters")
        return v
