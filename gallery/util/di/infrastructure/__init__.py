"""Infrastructure providers."""

# Import bases
from .auth_provider import AuthProviderProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .auth_provider import ProdAuthProviderProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "AuthProviderProvider",
    "PersistenceProvider",
    "ProdAuthProviderProvider",
    "ProdPersistenceProvider",
]
