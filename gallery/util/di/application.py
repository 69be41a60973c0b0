"""Application layer DI providers."""

from dishka import Scope, provide

from gallery.application.usecase.auth import (
    CompleteSignInUseCase,
    GetViewerUseCase,
    SignOutUseCase,
)
from gallery.application.usecase.caption import ListCaptionsUseCase
from gallery.application.usecase.image import ListImagesUseCase
from gallery.application.usecase.vote import SubmitVoteUseCase
from gallery.domain.service import (
    AuthService,
    CaptionService,
    IdentityService,
    ImageService,
    VoteService,
)
from gallery.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_complete_sign_in_use_case(
        self, auth_service: AuthService
    ) -> CompleteSignInUseCase:
        """Provide complete sign-in use case."""
        return CompleteSignInUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_sign_out_use_case(self, auth_service: AuthService) -> SignOutUseCase:
        """Provide sign-out use case."""
        return SignOutUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_viewer_use_case(
        self, identity_service: IdentityService
    ) -> GetViewerUseCase:
        """Provide get viewer use case."""
        return GetViewerUseCase(identity_service=identity_service)

    # Read views
    @provide(scope=Scope.REQUEST)
    def get_list_captions_use_case(
        self,
        caption_service: CaptionService,
        vote_service: VoteService,
        identity_service: IdentityService,
    ) -> ListCaptionsUseCase:
        """Provide list captions use case."""
        return ListCaptionsUseCase(
            caption_service=caption_service,
            vote_service=vote_service,
            identity_service=identity_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_images_use_case(
        self,
        image_service: ImageService,
        caption_service: CaptionService,
        vote_service: VoteService,
        identity_service: IdentityService,
    ) -> ListImagesUseCase:
        """Provide list images use case."""
        return ListImagesUseCase(
            image_service=image_service,
            caption_service=caption_service,
            vote_service=vote_service,
            identity_service=identity_service,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_vote_use_case(self, vote_service: VoteService) -> SubmitVoteUseCase:
        """Provide submit vote use case."""
        return SubmitVoteUseCase(vote_service=vote_service)
