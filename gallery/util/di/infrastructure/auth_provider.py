"""Auth provider infrastructure providers."""

from dishka import Scope, provide

from gallery.adapter.auth_provider import (
    AuthProviderHttpClient,
    RealAuthProviderClient,
)
from gallery.config import Settings
from gallery.util.di.base import ProviderBase
from gallery.util.error import ConfigurationError


class AuthProviderProvider(ProviderBase):
    """Auth provider component base."""

    __mock_component__ = "auth_provider"


class ProdAuthProviderProvider(AuthProviderProvider):
    """Production auth provider talking to the managed backend."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_auth_provider_client(self, settings: Settings) -> AuthProviderHttpClient:
        """Provide the backend auth client.

        Raises:
            ConfigurationError: If production runs with placeholder secrets
        """
        if settings.environment == "production" and settings.uses_placeholder_secrets:
            raise ConfigurationError(
                "BACKEND__ANON_KEY and AUTH__JWT_SECRET must be set in production"
            )

        return RealAuthProviderClient(
            base_url=settings.backend.url,
            anon_key=settings.backend.anon_key,
        )
