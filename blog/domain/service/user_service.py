"""User domain service."""

from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from blog.config import AuthSettings
from blog.domain.error import NotFoundError, ValidationError
from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import Email, Role, UserId, Username
from blog.util.password import PasswordHasher


class UserService:
    """Domain service for user operations."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (password policy)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("user", str(user_id))
            return user

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        role: Role = Role.USER,
    ) -> User:
        """Create a new user account.

        Every violated rule is reported at once, including uniqueness.

        Args:
            username: Requested username
            email: Email address
            password: Plain text password
            role: Role to grant; self-registration always uses the default

        Returns:
            The saved user

        Raises:
            ValidationError: Invalid or already taken username/email, or a
                password that is too short
        """
        with logfire.span("user_service.register", username=username):
            errors: list[str] = []

            username_value = _validated(Username, "username", username, errors)
            email_value = _validated(Email, "email", email, errors)
            if len(password or "") < self.auth_settings.min_password_length:
                errors.append(
                    "password: Password must be at least "
                    f"{self.auth_settings.min_password_length} characters"
                )

            if username_value is not None and await self.user_repository.find_by_username(
                username_value
            ):
                errors.append("username: Username is already taken")
            if email_value is not None and await self.user_repository.find_by_email(
                email_value
            ):
                errors.append("email: Email is already registered")

            if errors:
                logfire.info("Registration rejected", errors=errors)
                raise ValidationError(errors)

            user = User(
                id=UserId(uuid4()),
                username=username_value,
                email=email_value,
                password_hash=PasswordHasher.hash(password),
                role=role,
            )
            saved = await self.user_repository.save(user)
            logfire.info(
                "User registered", user_id=str(saved.id), role=saved.role.value
            )
            return saved


def _validated(value_type, field: str, raw: str, errors: list[str]) -> str | None:
    try:
        return value_type(raw or "").root
    except PydanticValidationError as e:
        errors.extend(
            f"{field}: {error['msg'].removeprefix('Value error, ')}"
            for error in e.errors()
        )
        return None
