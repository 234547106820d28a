"""Base model for blog entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for users, posts and comments.

    Entities are immutable; changes go through ``model_copy(update=...)`` and
    are validated again before they are saved.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )
