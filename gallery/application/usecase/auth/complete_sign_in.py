"""Complete sign-in use case."""

from pydantic import BaseModel

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.service import AuthService


class CompleteSignInRequest(BaseModel):
    """Sign-in callback request."""

    code: str
    code_verifier: str | None = None


class CompleteSignInResponse(BaseModel):
    """Sign-in callback response."""

    access_token: str
    expires_in: int | None


class CompleteSignInUseCase(
    BaseUseCase[CompleteSignInRequest, CompleteSignInResponse]
):
    """Use case for the auth provider's sign-in callback."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize complete sign-in use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: CompleteSignInRequest) -> CompleteSignInResponse:
        """Exchange the callback code for a session.

        Raises:
            AuthProviderError: If the provider rejects the code
        """
        session = await self.auth_service.complete_sign_in(
            request.code, request.code_verifier
        )
        return CompleteSignInResponse(
            access_token=session.access_token,
            expires_in=session.expires_in,
        )
