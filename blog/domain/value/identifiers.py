"""Strongly typed identifiers for blog domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from blog.domain.error import InvalidIdentifierError

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)


def parse_uuid(raw: str, resource: str) -> UUID:
    """Parse a resource key received from a client.

    Args:
        raw: Identifier as received (path segment, body field)
        resource: Resource name used in the error message

    Returns:
        Parsed UUID

    Raises:
        InvalidIdentifierError: If the value is not a well-formed UUID
    """
    try:
        return UUID(raw)
    except (TypeError, ValueError, AttributeError):
        raise InvalidIdentifierError(resource, str(raw))


def parse_post_id(raw: str) -> PostId:
    return PostId(parse_uuid(raw, "post"))


def parse_comment_id(raw: str) -> CommentId:
    return CommentId(parse_uuid(raw, "comment"))


def parse_user_id(raw: str) -> UserId:
    return UserId(parse_uuid(raw, "user"))
