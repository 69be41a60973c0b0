"""Session token domain service."""

from uuid import UUID

import logfire

from gallery.config import AuthSettings
from gallery.domain.model import Principal
from gallery.domain.value import PrincipalId
from gallery.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class SessionService(Service):
    """Domain service turning provider-issued access tokens into principals."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize session service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify an access token and extract its payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("session_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("Access token verified", principal_id=payload.sub)
                return payload
            except JWTError as e:
                logfire.info("Access token verification failed", error=str(e))
                raise

    def get_principal_from_token(self, token: str | None) -> Principal | None:
        """Extract the principal from an access token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Principal if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return Principal(
                id=PrincipalId(UUID(payload.sub)),
                email=payload.email,
                role=payload.role,
            )
        except (JWTError, ValueError) as e:
            # Invalid token or non-UUID subject, treat as unauthenticated
            logfire.debug(
                "Token rejected, treating as unauthenticated", error=str(e)
            )
            return None
