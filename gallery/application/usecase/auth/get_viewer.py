"""Get viewer use case."""

from pydantic import BaseModel

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.error import AuthenticationRequiredError, ProfileNotProvisionedError
from gallery.domain.model import Principal
from gallery.domain.service import IdentityService
from gallery.domain.value import ProfileSource


class GetViewerRequest(BaseModel):
    """Get viewer request."""

    viewer: Principal | None


class GetViewerResponse(BaseModel):
    """Get viewer response."""

    principal_id: str
    email: str | None
    profile_id: str | None  # None when no profile is provisioned and fallback is off
    profile_source: ProfileSource | None


class GetViewerUseCase(BaseUseCase[GetViewerRequest, GetViewerResponse]):
    """Use case describing the signed-in viewer and their profile."""

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize get viewer use case.

        Args:
            identity_service: Identity resolution service
        """
        self.identity_service = identity_service

    async def execute(self, request: GetViewerRequest) -> GetViewerResponse:
        """Execute get viewer flow.

        Raises:
            AuthenticationRequiredError: If there is no viewer
        """
        if request.viewer is None:
            raise AuthenticationRequiredError()

        try:
            resolved = await self.identity_service.resolve(request.viewer)
        except ProfileNotProvisionedError:
            resolved = None

        return GetViewerResponse(
            principal_id=str(request.viewer.id),
            email=request.viewer.email,
            profile_id=str(resolved.profile_id) if resolved else None,
            profile_source=resolved.source if resolved else None,
        )
