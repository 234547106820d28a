"""Login use case."""

from pydantic import BaseModel

from blog.application.usecase.common import UserInfo
from blog.domain.service import AuthService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user: UserInfo


class LoginUseCase:
    """Use case for email and password login."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            UnauthenticatedError: Unknown email or wrong password
        """
        user = await self.auth_service.verify_credentials(
            request.email, request.password
        )
        token = self.auth_service.issue_token(user)
        return LoginResponse(token=token, user=UserInfo.from_user(user))
