"""API client errors."""


class ClientError(Exception):
    """Base API client error."""

    pass


class APIError(ClientError):
    """The API answered with a non-success status.

    Attributes:
        status_code: HTTP status
        message: Server supplied message
        errors: Individual field violations, when reported
    """

    def __init__(
        self, status_code: int, message: str, errors: list[str] | None = None
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.errors = errors or []
        super().__init__(f"{status_code}: {message}")


class SessionExpiredError(APIError):
    """The API rejected the session token; the stored token was cleared."""

    pass
