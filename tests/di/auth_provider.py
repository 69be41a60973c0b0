"""Mock auth provider providers for testing."""

from dishka import Scope, provide

from gallery.adapter.auth_provider import (
    AuthProviderHttpClient,
    MockAuthProviderClient,
)
from gallery.util.di.infrastructure.auth_provider import AuthProviderProvider


class MockAuthProviderProvider(AuthProviderProvider):
    """Mock auth provider using a client that never leaves the process."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_auth_provider_client(self) -> AuthProviderHttpClient:
        """Provide mock auth provider client."""
        return MockAuthProviderClient()
