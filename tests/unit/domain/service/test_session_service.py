"""Unit tests for SessionService."""

from datetime import timedelta

import jwt
import pytest

from gallery.config import AuthSettings
from gallery.domain.service import SessionService
from gallery.util.jwt import JWTError, create_token
from tests.harness import make_principal


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret="test-secret-with-enough-length-for-hs256")


@pytest.fixture
def session_service(auth_settings):
    return SessionService(auth_settings=auth_settings)


class TestGetPrincipalFromToken:
    """Tests for get_principal_from_token method."""

    def test_valid_token_yields_principal(self, session_service, auth_settings):
        """A valid provider token should map to its principal."""
        # Arrange
        principal = make_principal(email="alice@example.com")
        token = create_token(str(principal.id), auth_settings, email=principal.email)

        # Act
        result = session_service.get_principal_from_token(token)

        # Assert
        assert result is not None
        assert result.id == principal.id
        assert result.email == "alice@example.com"
        assert result.role == "authenticated"

    @pytest.mark.parametrize("token", [None, ""])
    def test_missing_token_is_anonymous(self, session_service, token):
        assert session_service.get_principal_from_token(token) is None

    def test_expired_token_is_anonymous(self, session_service, auth_settings):
        token = create_token(
            str(make_principal().id), auth_settings, expires_in=timedelta(minutes=-5)
        )

        assert session_service.get_principal_from_token(token) is None

    def test_token_signed_with_other_secret_is_anonymous(self, session_service):
        other = AuthSettings(jwt_secret="another-secret-with-enough-length-too")
        token = create_token(str(make_principal().id), other)

        assert session_service.get_principal_from_token(token) is None

    def test_token_for_other_audience_is_anonymous(self, session_service, auth_settings):
        token = create_token(
            str(make_principal().id),
            auth_settings.model_copy(update={"jwt_audience": "service_role"}),
        )

        assert session_service.get_principal_from_token(token) is None

    def test_non_uuid_subject_is_anonymous(self, session_service, auth_settings):
        token = create_token("not-a-uuid", auth_settings)

        assert session_service.get_principal_from_token(token) is None

    def test_garbage_token_is_anonymous(self, session_service):
        assert session_service.get_principal_from_token("not.a.jwt") is None


class TestVerifyToken:
    """Tests for verify_token method."""

    def test_expired_token_raises(self, session_service, auth_settings):
        token = create_token(
            str(make_principal().id), auth_settings, expires_in=timedelta(seconds=-1)
        )

        with pytest.raises(JWTError, match="Token has expired"):
            session_service.verify_token(token)

    def test_token_without_subject_raises(self, session_service, auth_settings):
        token = jwt.encode(
            {"aud": auth_settings.jwt_audience, "exp": 9999999999},
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="Invalid token"):
            session_service.verify_token(token)
