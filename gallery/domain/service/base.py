"""Base service class for domain services."""


class Service:
    """Base class for gallery domain services.

    Services own the business rules (vote validation, identity resolution,
    visibility filtering) and reach the store only through repositories.
    """

    pass
