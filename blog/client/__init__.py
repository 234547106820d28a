"""Python client for the blog API."""

from blog.client.api import BearerAuth, BlogClient
from blog.client.config import ClientConfig
from blog.client.error import APIError, ClientError, SessionExpiredError
from blog.client.session import SessionState, SessionStore

__all__ = [
    "APIError",
    "BearerAuth",
    "BlogClient",
    "ClientConfig",
    "ClientError",
    "SessionExpiredError",
    "SessionState",
    "SessionStore",
]
