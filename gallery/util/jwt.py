"""Session token utilities.

Access tokens are minted by the auth provider; this module only verifies them.
``create_token`` exists for local development and tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from gallery.config import AuthSettings


class TokenPayload(BaseModel):
    """Access token payload."""

    sub: str
    email: str | None = None
    role: str | None = None
    aud: str | list[str] | None = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    subject: str,
    settings: AuthSettings,
    email: str | None = None,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Create an access token shaped like the provider's.

    Args:
        subject: Principal ID (``sub`` claim)
        settings: Authentication settings
        email: Optional email claim
        expires_in: Token lifetime (negative values produce expired tokens)

    Returns:
        Encoded JWT token
    """
    payload = {
        "sub": subject,
        "email": email,
        "role": "authenticated",
        "aud": settings.jwt_audience,
        "exp": datetime.now(timezone.utc) + expires_in,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode an access token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"require": ["sub", "exp"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValidationError):
        raise JWTError("Invalid token")
