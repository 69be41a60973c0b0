"""Authentication domain service."""

import logfire

from gallery.domain.value import ProviderSession

from .base import Service


class AuthProviderClient:
    """Interface to the managed auth provider's session API."""

    async def exchange_code_for_session(
        self, code: str, code_verifier: str | None = None
    ) -> ProviderSession:
        """Exchange an authorization code for a session.

        Args:
            code: Authorization code from the sign-in callback
            code_verifier: PKCE verifier, if the flow used one

        Returns:
            Session issued by the provider
        """
        raise NotImplementedError

    async def sign_out(self, access_token: str) -> None:
        """Revoke the session behind an access token.

        Args:
            access_token: Access token of the session to end
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for sign-in and sign-out.

    The authentication protocol itself is the provider's job; this service
    only forwards the callback code and the sign-out request.
    """

    def __init__(self, auth_provider_client: AuthProviderClient) -> None:
        """Initialize auth service.

        Args:
            auth_provider_client: Auth provider client
        """
        self.auth_provider_client = auth_provider_client

    async def complete_sign_in(
        self, code: str, code_verifier: str | None = None
    ) -> ProviderSession:
        """Exchange a callback code for a session.

        Raises:
            AuthProviderError: If the provider rejects the exchange
        """
        with logfire.span("auth_service.complete_sign_in"):
            session = await self.auth_provider_client.exchange_code_for_session(
                code, code_verifier
            )
            logfire.info("Sign-in completed", expires_in=session.expires_in)
            return session

    async def sign_out(self, access_token: str) -> None:
        """End the provider session.

        Raises:
            AuthProviderError: If the provider rejects the sign-out
        """
        with logfire.span("auth_service.sign_out"):
            await self.auth_provider_client.sign_out(access_token)
            logfire.info("Signed out")
