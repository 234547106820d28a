"""API client configuration."""

from pydantic import BaseModel

DEFAULT_BASE_URL = "http://localhost:5000/api"


class ClientConfig(BaseModel):
    """Where the client talks to and how long it waits.

    Passed explicitly; the client never reads environment variables.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
