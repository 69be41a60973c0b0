"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class AuthenticationRequiredError(DomainError):
    """Raised when an operation needs an authenticated principal."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ProfileNotProvisionedError(DomainError):
    """Raised when no profile exists for a principal and fallback is disabled."""

    def __init__(self, principal_id: str):
        self.principal_id = principal_id
        super().__init__(f"No profile provisioned for principal {principal_id}")


class StoreWriteError(DomainError):
    """Raised when the store rejects a write (constraint or connectivity)."""

    pass
