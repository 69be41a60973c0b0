"""List images use case."""

import logfire
from datetime import datetime

from pydantic import BaseModel

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.error import AuthenticationRequiredError
from gallery.domain.model import Principal
from gallery.domain.service import (
    CaptionService,
    IdentityService,
    ImageService,
    VoteService,
)


class ImageListItem(BaseModel):
    """Image list item in response."""

    image_id: str
    url: str | None
    image_description: str | None
    additional_context: str | None
    celebrity_recognition: str | None
    is_public: bool
    is_common_use: bool
    created_datetime_utc: datetime
    caption_id: str | None  # Latest public caption, the one vote controls target
    caption_content: str | None
    current_vote: int | None


class ListImagesRequest(BaseModel):
    """List images request."""

    viewer: Principal | None = None


class ListImagesResponse(BaseModel):
    """List images response."""

    images: list[ImageListItem]
    viewer_email: str | None


class ListImagesUseCase(BaseUseCase[ListImagesRequest, ListImagesResponse]):
    """Use case for the signed-in image gallery."""

    def __init__(
        self,
        image_service: ImageService,
        caption_service: CaptionService,
        vote_service: VoteService,
        identity_service: IdentityService,
    ) -> None:
        self.image_service = image_service
        self.caption_service = caption_service
        self.vote_service = vote_service
        self.identity_service = identity_service

    async def execute(self, request: ListImagesRequest) -> ListImagesResponse:
        """Execute list images flow.

        Args:
            request: List images request

        Returns:
            Public images, most recent first, each with its votable caption

        Raises:
            AuthenticationRequiredError: If there is no viewer
        """
        if request.viewer is None:
            raise AuthenticationRequiredError("Please sign in to view images")

        with logfire.span("list_images.execute", principal_id=str(request.viewer.id)):
            images = await self.image_service.list_public_images()
            captions = await self.caption_service.latest_public_captions_for_images(
                [image.id for image in images]
            )

            user_votes = {}
            resolved = await self.identity_service.resolve_viewer(request.viewer)
            if resolved and captions:
                user_votes = await self.vote_service.get_votes_for_captions(
                    resolved.profile_id, [caption.id for caption in captions.values()]
                )

            items = []
            for image in images:
                caption = captions.get(image.id)
                vote = user_votes.get(caption.id) if caption else None
                items.append(
                    ImageListItem(
                        image_id=str(image.id),
                        url=image.url,
                        image_description=image.image_description,
                        additional_context=image.additional_context,
                        celebrity_recognition=image.celebrity_recognition,
                        is_public=image.is_public,
                        is_common_use=image.is_common_use,
                        created_datetime_utc=image.created_datetime_utc,
                        caption_id=str(caption.id) if caption else None,
                        caption_content=caption.content if caption else None,
                        current_vote=int(vote) if vote is not None else None,
                    )
                )

            logfire.info("Images listed", count=len(items))

            return ListImagesResponse(images=items, viewer_email=request.viewer.email)
