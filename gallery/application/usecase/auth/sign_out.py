"""Sign-out use case."""

from pydantic import BaseModel

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.service import AuthService


class SignOutRequest(BaseModel):
    """Sign-out request."""

    access_token: str | None


class SignOutResponse(BaseModel):
    """Sign-out response."""

    success: bool
    message: str


class SignOutUseCase(BaseUseCase[SignOutRequest, SignOutResponse]):
    """Use case for ending the viewer's session."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: SignOutRequest) -> SignOutResponse:
        """End the provider session, if there is one.

        Raises:
            AuthProviderError: If the provider rejects the sign-out
        """
        if not request.access_token:
            return SignOutResponse(success=True, message="No active session")

        await self.auth_service.sign_out(request.access_token)
        return SignOutResponse(success=True, message="Signed out")
