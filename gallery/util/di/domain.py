"""Domain layer DI providers."""

from dishka import Scope, provide

from gallery.adapter.auth_provider import AuthProviderHttpClient
from gallery.config import AuthSettings, IdentitySettings
from gallery.domain.repository import (
    CaptionRepository,
    ImageRepository,
    ProfileRepository,
    VoteRepository,
)
from gallery.domain.service import (
    AuthService,
    CaptionService,
    IdentityService,
    ImageService,
    SessionService,
    VoteService,
)
from gallery.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, auth_provider_client: AuthProviderHttpClient
    ) -> AuthService:
        """Provide sign-in/sign-out domain service."""
        return AuthService(auth_provider_client=auth_provider_client)

    @provide
    def get_session_service(self, auth_settings: AuthSettings) -> SessionService:
        """Provide session token domain service."""
        return SessionService(auth_settings=auth_settings)

    @provide
    def get_identity_service(
        self,
        profile_repository: ProfileRepository,
        identity_settings: IdentitySettings,
    ) -> IdentityService:
        """Provide identity resolution domain service."""
        return IdentityService(
            profile_repository=profile_repository,
            identity_settings=identity_settings,
        )

    @provide
    def get_caption_service(
        self, caption_repository: CaptionRepository
    ) -> CaptionService:
        """Provide caption domain service."""
        return CaptionService(caption_repository=caption_repository)

    @provide
    def get_image_service(self, image_repository: ImageRepository) -> ImageService:
        """Provide image domain service."""
        return ImageService(image_repository=image_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        caption_service: CaptionService,
        identity_service: IdentityService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            caption_service=caption_service,
            identity_service=identity_service,
        )
