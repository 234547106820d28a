"""Domain layer errors.

Every failure a use case can classify is one of these. The HTTP interface
maps each class to a status code; anything else is reported as an internal
error.
"""

from pydantic import ValidationError as PydanticValidationError


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """One or more field constraints were violated.

    Carries every violation, not just the first one.
    """

    def __init__(self, errors: list[str], message: str = "Validation error"):
        self.errors = errors
        super().__init__(message)

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        """Collect all messages from a pydantic validation failure."""
        return cls(errors=[_format_error(error) for error in exc.errors()])


def _format_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "Invalid value")
    # pydantic prefixes custom ValueError messages
    message = message.removeprefix("Value error, ")
    return f"{location}: {message}" if location else message


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource.capitalize()} not found")


class InvalidIdentifierError(DomainError):
    """Raised when a resource key is not well-formed."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"Invalid {resource} ID")


class ForbiddenError(DomainError):
    """Authenticated caller is not permitted to perform the action.

    The message never reveals whether the target resource exists.
    """

    def __init__(self, message: str = "Not authorized to perform this action"):
        super().__init__(message)


class AuthenticationError(DomainError):
    """Base for every failure to establish who the caller is."""

    pass


class UnauthenticatedError(AuthenticationError):
    """No credentials, malformed credentials, or wrong email/password."""

    def __init__(self, message: str = "No token provided, authorization denied"):
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    """Token signature or expiry check failed."""

    def __init__(self, message: str = "Token is not valid"):
        super().__init__(message)


class UnknownUserError(AuthenticationError):
    """Token is valid but the user it names no longer exists."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("Token is not valid")
