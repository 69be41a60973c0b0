"""Auth provider client implementation.

Talks to the managed backend's auth HTTP API (GoTrue-compatible). Only the
two calls this service needs are implemented: exchanging a PKCE sign-in code
for a session, and revoking a session.
"""

import httpx
import logfire
from pydantic import ValidationError

from gallery.adapter.error import AuthProviderError
from gallery.domain.service.auth_service import AuthProviderClient
from gallery.domain.value import ProviderSession


class AuthProviderHttpClient(AuthProviderClient):
    """Base class for auth provider clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealAuthProviderClient(AuthProviderHttpClient):
    """Auth provider client backed by HTTP calls."""

    def __init__(self, base_url: str, anon_key: str, timeout: float = 30.0) -> None:
        """Initialize auth provider client.

        Args:
            base_url: Backend project URL (no trailing slash)
            anon_key: Public anon key, sent as the ``apikey`` header
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.anon_key = anon_key
        self.timeout = timeout

        self.token_url = f"{base_url}/auth/v1/token"
        self.logout_url = f"{base_url}/auth/v1/logout"

    def _headers(self, access_token: str | None = None) -> dict[str, str]:
        headers = {"apikey": self.anon_key, "Content-Type": "application/json"}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    async def exchange_code_for_session(
        self, code: str, code_verifier: str | None = None
    ) -> ProviderSession:
        """Exchange an authorization code for a session.

        Args:
            code: Authorization code from the sign-in callback
            code_verifier: PKCE verifier, if the flow used one

        Returns:
            Session issued by the provider

        Raises:
            AuthProviderError: If the exchange fails
        """
        body = {"auth_code": code}
        if code_verifier:
            body["code_verifier"] = code_verifier

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_url,
                    params={"grant_type": "pkce"},
                    json=body,
                    headers=self._headers(),
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Code exchange failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise AuthProviderError(
                        f"Code exchange failed: {response.status_code}"
                    )

        except httpx.HTTPError as e:
            logfire.error("Code exchange HTTP error", error=str(e))
            raise AuthProviderError(f"HTTP error during code exchange: {e}")

        return _session_from_token_response(response)

    async def sign_out(self, access_token: str) -> None:
        """Revoke the session behind an access token.

        Args:
            access_token: Access token of the session to end

        Raises:
            AuthProviderError: If the provider rejects the request
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.logout_url,
                    headers=self._headers(access_token),
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Sign-out HTTP error", error=str(e))
            raise AuthProviderError(f"HTTP error during sign-out: {e}")

        # 401 means the session is already gone
        if response.status_code not in (200, 204, 401):
            logfire.error(
                "Sign-out failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise AuthProviderError(f"Sign-out failed: {response.status_code}")


class MockAuthProviderClient(AuthProviderHttpClient):
    """Mock auth provider client for testing.

    Returns deterministic sessions without making real API calls. Codes and
    access tokens starting with ``bad`` are rejected.
    """

    def __init__(self, access_token: str = "mock-access-token") -> None:
        self.access_token = access_token
        self.signed_out: list[str] = []

    async def exchange_code_for_session(
        self, code: str, code_verifier: str | None = None
    ) -> ProviderSession:
        """Return a mock session."""
        if code.startswith("bad"):
            raise AuthProviderError("Invalid authorization code")
        return ProviderSession(
            access_token=self.access_token,
            refresh_token="mock-refresh-token",
            expires_in=3600,
        )

    async def sign_out(self, access_token: str) -> None:
        """Record the sign-out; tokens starting with ``bad`` are rejected."""
        if access_token.startswith("bad"):
            raise AuthProviderError("Sign-out failed: 500")
        self.signed_out.append(access_token)


def _session_from_token_response(response: httpx.Response) -> ProviderSession:
    """Build a session from a token endpoint response.

    Raises:
        AuthProviderError: If the body is not a JSON object carrying a usable session
    """
    try:
        result = response.json()
    except ValueError as e:
        logfire.error("Code exchange returned non-JSON body", error=response.text[:200])
        raise AuthProviderError("Code exchange response is not JSON") from e

    if not isinstance(result, dict) or "access_token" not in result:
        raise AuthProviderError("Code exchange response has no access_token")

    try:
        return ProviderSession(
            access_token=result["access_token"],
            refresh_token=result.get("refresh_token"),
            expires_in=result.get("expires_in"),
            token_type=result.get("token_type", "bearer"),
        )
    except ValidationError as e:
        logfire.error("Code exchange returned malformed session", error=str(e))
        raise AuthProviderError("Code exchange response is malformed") from e
