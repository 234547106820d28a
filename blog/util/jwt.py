"""Signed session tokens (HS256 by default)."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from blog.config import AuthSettings

_REQUIRED_CLAIMS = ["exp", "user_id"]


class TokenPayload(BaseModel):
    """Claims carried by a session token."""

    user_id: str
    username: str
    exp: datetime


class JWTError(Exception):
    """Token could not be decoded, was forged, or has expired."""


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Sign a token for ``user_id`` valid for ``settings.jwt_expiry_days``."""
    claims = TokenPayload(
        user_id=user_id,
        username=username,
        exp=datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    )
    return jwt.encode(
        claims.model_dump(), settings.jwt_secret, algorithm=settings.jwt_algorithm
    )


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode ``token`` and check its signature and expiry.

    Raises:
        JWTError: With "Token has expired" for stale tokens, otherwise a
            generic message
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": _REQUIRED_CLAIMS},
        )
        return TokenPayload.model_validate(claims)
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except (jwt.InvalidTokenError, ValidationError) as e:
        raise JWTError("Invalid token") from e
