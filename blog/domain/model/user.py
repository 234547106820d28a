"""User aggregate root.

Users register with a username, email and password. Their role decides what
they may publish.
"""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import Role, UserId


class User(DomainModel):
    """User aggregate root.

    ``password_hash`` never leaves the domain; API responses are built from
    the other fields only.
    """

    id: UserId
    username: str = Field(min_length=3, max_length=30)
    email: str
    password_hash: str
    role: Role = Role.USER
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class AuthenticatedUser(DomainModel):
    """Identity of the caller, produced by the credential verifier."""

    user_id: UserId
    username: str
    role: Role
