"""Session token service."""

import logfire

from blog.config import AuthSettings
from blog.util.jwt import JWTError, TokenPayload, create_token, verify_token


class JWTService:
    """Issues and checks the signed session tokens handed to clients.

    Tokens carry the user id and username and expire after
    ``auth_settings.jwt_expiry_days``.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str) -> str:
        token = create_token(user_id, username, self.auth_settings)
        logfire.info("Session token issued", user_id=user_id)
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Check signature and expiry.

        Raises:
            JWTError: If the token is malformed, forged or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.info("Session token rejected", reason=str(e))
            raise
