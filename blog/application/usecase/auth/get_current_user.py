"""Get current user use case."""

from pydantic import BaseModel

from blog.application.usecase.common import UserInfo
from blog.domain.service import AuthService, UserService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    authorization: str | None  # Raw Authorization header


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user: UserInfo


class GetCurrentUserUseCase:
    """Use case for getting the current authenticated user."""

    def __init__(self, auth_service: AuthService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            auth_service: Auth domain service
            user_service: User domain service
        """
        self.auth_service = auth_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Raises:
            AuthenticationError: If the header does not identify a stored user
        """
        actor = await self.auth_service.authenticate(request.authorization)
        user = await self.user_service.get_by_id(actor.user_id)
        return GetCurrentUserResponse(user=UserInfo.from_user(user))
