"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from blog.domain.model.common import DomainModel
from blog.domain.value import DEFAULT_CATEGORY, Category, PostId, UserId

TITLE_MAX_LENGTH = 200
BODY_MIN_LENGTH = 10
TAG_MAX_LENGTH = 50


def normalize_tags(value: object) -> list[str]:
    """Normalize submitted tags.

    Accepts a list or a comma separated string. Entries are trimmed and empty
    ones dropped; order and duplicates are preserved.
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        raise ValueError("Tags must be a list or a comma separated string")
    return [str(tag).strip() for tag in value if str(tag).strip()]


class Post(DomainModel):
    """Post aggregate root.

    ``author_username`` is joined from the users table on reads and is not
    stored with the post.
    """

    id: PostId
    title: str
    body: str
    author_id: UserId
    author_username: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    category: Category = DEFAULT_CATEGORY
    views: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title is required")
        if len(v) > TITLE_MAX_LENGTH:
            raise ValueError(f"Title cannot exceed {TITLE_MAX_LENGTH} characters")
        return v

    @field_validator("body")
    @classmethod
    def validate_body(cls, v: str) -> str:
        if not v:
            raise ValueError("Body content is required")
        if len(v) < BODY_MIN_LENGTH:
            raise ValueError(
                f"Body must be at least {BODY_MIN_LENGTH} characters long"
            )
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, v: object) -> list[str]:
        tags = normalize_tags(v)
        if any(len(tag) > TAG_MAX_LENGTH for tag in tags):
            raise ValueError(f"Tag cannot exceed {TAG_MAX_LENGTH} characters")
        return tags
