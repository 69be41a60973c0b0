"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class AuthProviderError(ProviderError):
    """The auth provider rejected a request or could not be reached."""

    pass
