"""Register use case."""

from pydantic import BaseModel

from blog.application.usecase.common import UserInfo
from blog.domain.service import AuthService, UserService


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    email: str
    password: str


class RegisterResponse(BaseModel):
    """Register response."""

    token: str
    user: UserInfo


class RegisterUseCase:
    """Use case for self-registration.

    New accounts always get the User role.
    """

    def __init__(self, user_service: UserService, auth_service: AuthService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            auth_service: Auth domain service (token issuing)
        """
        self.user_service = user_service
        self.auth_service = auth_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Create the account and issue a session token.

        Raises:
            ValidationError: Invalid fields or username/email already taken
        """
        user = await self.user_service.register(
            username=request.username,
            email=request.email,
            password=request.password,
        )
        token = self.auth_service.issue_token(user)
        return RegisterResponse(token=token, user=UserInfo.from_user(user))
