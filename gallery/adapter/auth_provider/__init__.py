"""Auth provider adapter."""

from .client import (
    AuthProviderHttpClient,
    MockAuthProviderClient,
    RealAuthProviderClient,
)

__all__ = [
    "AuthProviderHttpClient",
    "MockAuthProviderClient",
    "RealAuthProviderClient",
]
