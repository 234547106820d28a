"""Authentication domain service.

Establishes who the caller is, either from a bearer token or from an
email and password pair.
"""

import logfire

from blog.domain.error import (
    InvalidIdentifierError,
    InvalidTokenError,
    UnauthenticatedError,
    UnknownUserError,
)
from blog.domain.model import AuthenticatedUser, User
from blog.domain.repository import UserRepository
from blog.domain.value import parse_user_id
from blog.util.jwt import JWTError
from blog.util.password import PasswordHasher

from .jwt_service import JWTService

BEARER_PREFIX = "Bearer "


class AuthService:
    """Domain service for credential verification."""

    def __init__(
        self, jwt_service: JWTService, user_repository: UserRepository
    ) -> None:
        """Initialize auth service.

        Args:
            jwt_service: JWT service
            user_repository: User repository
        """
        self.jwt_service = jwt_service
        self.user_repository = user_repository

    async def authenticate(self, authorization: str | None) -> AuthenticatedUser:
        """Verify a raw ``Authorization`` header value.

        Args:
            authorization: Header value, expected as ``Bearer <token>``

        Returns:
            The authenticated caller, without any credential material

        Raises:
            UnauthenticatedError: Header missing, empty or not a bearer token
            InvalidTokenError: Signature or expiry check failed
            UnknownUserError: Token names a user that no longer exists
        """
        with logfire.span("auth_service.authenticate"):
            if not authorization or not authorization.startswith(BEARER_PREFIX):
                raise UnauthenticatedError()
            token = authorization[len(BEARER_PREFIX) :].strip()
            if not token:
                raise UnauthenticatedError()

            try:
                payload = self.jwt_service.verify_token(token)
                user_id = parse_user_id(payload.user_id)
            except (JWTError, InvalidIdentifierError):
                raise InvalidTokenError()

            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("Token for unknown user", user_id=str(user_id))
                raise UnknownUserError(str(user_id))

            return AuthenticatedUser(
                user_id=user.id, username=user.username, role=user.role
            )

    async def verify_credentials(self, email: str, password: str) -> User:
        """Check an email and password pair.

        Args:
            email: Email address (any case)
            password: Plain text password

        Returns:
            The matching user

        Raises:
            UnauthenticatedError: No such user or wrong password
        """
        with logfire.span("auth_service.verify_credentials"):
            user = await self.user_repository.find_by_email(email.strip().lower())
            if not user or not PasswordHasher.verify(password, user.password_hash):
                logfire.warn("Invalid login attempt")
                raise UnauthenticatedError("Invalid credentials")
            return user

    def issue_token(self, user: User) -> str:
        """Issue a session token for the user."""
        return self.jwt_service.create_token(str(user.id), user.username)
