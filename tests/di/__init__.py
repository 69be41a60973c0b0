"""Mock providers for testing."""

from .auth_provider import MockAuthProviderProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockAuthProviderProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
