"""List captions use case."""

import logfire
from datetime import datetime

from pydantic import BaseModel

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.model import Principal
from gallery.domain.service import CaptionService, IdentityService, VoteService


class CaptionListItem(BaseModel):
    """Caption list item in response."""

    caption_id: str
    content: str | None
    image_id: str | None
    profile_id: str | None
    like_count: int
    created_datetime_utc: datetime
    current_vote: int | None  # Viewer's vote: 1, -1, or None


class ListCaptionsRequest(BaseModel):
    """List captions request."""

    viewer: Principal | None = None


class ListCaptionsResponse(BaseModel):
    """List captions response."""

    captions: list[CaptionListItem]
    is_authenticated: bool


class ListCaptionsUseCase(BaseUseCase[ListCaptionsRequest, ListCaptionsResponse]):
    """Use case for listing public captions with the viewer's votes."""

    def __init__(
        self,
        caption_service: CaptionService,
        vote_service: VoteService,
        identity_service: IdentityService,
    ) -> None:
        """Initialize list captions use case.

        Args:
            caption_service: Caption domain service
            vote_service: Vote domain service
            identity_service: Identity resolution service
        """
        self.caption_service = caption_service
        self.vote_service = vote_service
        self.identity_service = identity_service

    async def execute(self, request: ListCaptionsRequest) -> ListCaptionsResponse:
        """Execute list captions flow.

        Args:
            request: List captions request

        Returns:
            Public captions, most recent first
        """
        with logfire.span(
            "list_captions.execute", authenticated=request.viewer is not None
        ):
            captions = await self.caption_service.list_public_captions()

            user_votes = {}
            resolved = await self.identity_service.resolve_viewer(request.viewer)
            if resolved and captions:
                user_votes = await self.vote_service.get_votes_for_captions(
                    resolved.profile_id, [caption.id for caption in captions]
                )

            items = [
                CaptionListItem(
                    caption_id=str(caption.id),
                    content=caption.content,
                    image_id=str(caption.image_id) if caption.image_id else None,
                    profile_id=str(caption.profile_id) if caption.profile_id else None,
                    like_count=caption.like_count,
                    created_datetime_utc=caption.created_datetime_utc,
                    current_vote=(
                        int(user_votes[caption.id]) if caption.id in user_votes else None
                    ),
                )
                for caption in captions
            ]

            logfire.info("Captions listed", count=len(items), voted=len(user_votes))

            return ListCaptionsResponse(
                captions=items,
                is_authenticated=request.viewer is not None,
            )
