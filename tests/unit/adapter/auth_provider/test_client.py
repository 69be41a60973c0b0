"""Unit tests for the auth provider HTTP client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from gallery.adapter.auth_provider import RealAuthProviderClient
from gallery.adapter.error import AuthProviderError


def _response(status_code: int, payload: dict | None = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload or {}
    response.text = str(payload)
    return response


@pytest.fixture
def client():
    return RealAuthProviderClient(
        base_url="https://project.example.co", anon_key="anon-key"
    )


class TestExchangeCodeForSession:
    """Tests for exchange_code_for_session method."""

    @pytest.mark.asyncio
    async def test_exchanges_code(self, client):
        """Should post the PKCE grant and map the session."""
        mock_response = _response(
            200,
            {
                "access_token": "at-123",
                "refresh_token": "rt-456",
                "expires_in": 3600,
                "token_type": "bearer",
            },
        )

        with patch("httpx.AsyncClient") as mock_client:
            post = AsyncMock(return_value=mock_response)
            mock_client.return_value.__aenter__.return_value.post = post

            session = await client.exchange_code_for_session("code-1", "verifier-1")

        assert session.access_token == "at-123"
        assert session.refresh_token == "rt-456"
        assert session.expires_in == 3600

        args, kwargs = post.call_args
        assert args[0] == "https://project.example.co/auth/v1/token"
        assert kwargs["params"] == {"grant_type": "pkce"}
        assert kwargs["json"] == {"auth_code": "code-1", "code_verifier": "verifier-1"}
        assert kwargs["headers"]["apikey"] == "anon-key"

    @pytest.mark.asyncio
    async def test_rejected_code_raises(self, client):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=_response(400, {"error": "invalid_grant"})
            )

            with pytest.raises(AuthProviderError, match="400"):
                await client.exchange_code_for_session("expired-code")

    @pytest.mark.asyncio
    async def test_network_error_raises(self, client):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                side_effect=httpx.ConnectError("connection refused")
            )

            with pytest.raises(AuthProviderError, match="HTTP error"):
                await client.exchange_code_for_session("code-1")

    @pytest.mark.asyncio
    async def test_response_without_token_raises(self, client):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=_response(200, {"user": {}})
            )

            with pytest.raises(AuthProviderError, match="no access_token"):
                await client.exchange_code_for_session("code-1")

    @pytest.mark.asyncio
    async def test_non_json_body_raises(self, client):
        """A gateway page served with 200 is a provider failure, not a crash."""
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=httpx.Response(200, text="<html>gateway</html>")
            )

            with pytest.raises(AuthProviderError, match="not JSON"):
                await client.exchange_code_for_session("code-1")

    @pytest.mark.parametrize(
        "payload, match",
        [
            (["at-123"], "no access_token"),
            ({"access_token": "at-123", "expires_in": "soon"}, "malformed"),
            ({"access_token": None}, "malformed"),
        ],
    )
    @pytest.mark.asyncio
    async def test_unusable_session_raises(self, client, payload, match):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=httpx.Response(200, json=payload)
            )

            with pytest.raises(AuthProviderError, match=match):
                await client.exchange_code_for_session("code-1")


class TestSignOut:
    """Tests for sign_out method."""

    @pytest.mark.parametrize("status_code", [200, 204, 401])
    @pytest.mark.asyncio
    async def test_accepted_statuses(self, client, status_code):
        """Already-expired sessions (401) count as signed out."""
        with patch("httpx.AsyncClient") as mock_client:
            post = AsyncMock(return_value=_response(status_code))
            mock_client.return_value.__aenter__.return_value.post = post

            await client.sign_out("at-123")

        args, kwargs = post.call_args
        assert args[0] == "https://project.example.co/auth/v1/logout"
        assert kwargs["headers"]["Authorization"] == "Bearer at-123"

    @pytest.mark.asyncio
    async def test_server_error_raises(self, client):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=_response(500)
            )

            with pytest.raises(AuthProviderError, match="500"):
                await client.sign_out("at-123")
