"""Caption domain service."""

from typing import Sequence
from uuid import UUID

import logfire

from gallery.domain.model import Caption
from gallery.domain.repository import CaptionRepository
from gallery.domain.value import CaptionId, ImageId

from .base import Service


class CaptionService(Service):
    """Domain service for caption reads."""

    def __init__(self, caption_repository: CaptionRepository) -> None:
        """Initialize caption service.

        Args:
            caption_repository: Caption repository
        """
        self.caption_repository = caption_repository

    async def get_caption_by_id(self, caption_id: str) -> Caption | None:
        """Get a caption by ID.

        Identifiers that are not UUIDs cannot reference a caption and are
        reported as not found without a store round-trip.

        Args:
            caption_id: Caption ID as received from the caller

        Returns:
            Caption if found, None otherwise
        """
        with logfire.span("caption_service.get_caption_by_id", caption_id=caption_id):
            try:
                parsed = CaptionId(UUID(caption_id))
            except ValueError:
                logfire.warn("Malformed caption id", caption_id=caption_id)
                return None

            caption = await self.caption_repository.find_by_id(parsed)
            if not caption:
                logfire.warn("Caption not found", caption_id=caption_id)
            return caption

    async def list_public_captions(self) -> list[Caption]:
        """List public captions, most recent first."""
        with logfire.span("caption_service.list_public_captions"):
            captions = await self.caption_repository.find_public()
            logfire.info("Public captions fetched", count=len(captions))
            return captions

    async def latest_public_captions_for_images(
        self, image_ids: Sequence[ImageId]
    ) -> dict[ImageId, Caption]:
        """Map each image to its most recent public caption.

        Args:
            image_ids: Images to look up

        Returns:
            Mapping of image ID to caption (images without captions are absent)
        """
        if not image_ids:
            return {}

        return await self.caption_repository.find_latest_public_by_images(image_ids)
