"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from blog.domain.value.common import RootValueObject


class Role(str, Enum):
    """User role.

    Registration always yields ``USER``; only an operator can grant the
    other roles.
    """

    ADMIN = "Admin"
    EDITOR = "Editor"
    USER = "User"

    @property
    def can_author(self) -> bool:
        """Whether this role may create, edit and delete posts."""
        return _AUTHORING_ROLES[self]

    @property
    def bypasses_ownership(self) -> bool:
        """Whether this role may modify content owned by someone else."""
        return _OWNERSHIP_BYPASS[self]


# One entry per role. A role missing here is a KeyError at first use.
_AUTHORING_ROLES: dict[Role, bool] = {
    Role.ADMIN: True,
    Role.EDITOR: True,
    Role.USER: False,
}

_OWNERSHIP_BYPASS: dict[Role, bool] = {
    Role.ADMIN: True,
    Role.EDITOR: False,
    Role.USER: False,
}


class Category(str, Enum):
    """Fixed set of post categories."""

    GENERAL = "General"
    TECHNOLOGY = "Technology"
    DEVELOPMENT = "Development"
    DESIGN = "Design"
    BUSINESS = "Business"
    LIFESTYLE = "Lifestyle"


DEFAULT_CATEGORY = Category.GENERAL


class Username(RootValueObject[str]):
    """Public user name.

    3-30 characters: letters, digits and underscores.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        v = v.strip()
        if not re.match(r"^[A-Za-z0-9_]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters: letters, digits or underscores"
            )
        return v


class Email(RootValueObject[str]):
    """Email address, stored lower-cased."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email shape."""
        v = v.strip().lower()
        if len(v) > 254 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Please enter a valid email")
        return v
