"""Image domain service."""

import logfire

from gallery.domain.model import Image
from gallery.domain.repository import ImageRepository

from .base import Service


class ImageService(Service):
    """Domain service for image reads."""

    def __init__(self, image_repository: ImageRepository) -> None:
        self.image_repository = image_repository

    async def list_public_images(self) -> list[Image]:
        """List public images, most recent first."""
        with logfire.span("image_service.list_public_images"):
            images = await self.image_repository.find_public()
            logfire.info("Public images fetched", count=len(images))
            return images
