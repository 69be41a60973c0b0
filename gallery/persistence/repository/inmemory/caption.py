"""In-memory caption repository for testing."""

from typing import Optional, Sequence

from gallery.domain.model.caption import Caption
from gallery.domain.repository.caption import CaptionRepository
from gallery.domain.value import CaptionId, ImageId


class InMemoryCaptionRepository(CaptionRepository):
    """In-memory implementation of CaptionRepository for testing."""

    def __init__(self) -> None:
        self._captions: dict[CaptionId, Caption] = {}

    def add(self, caption: Caption) -> Caption:
        """Seed a caption."""
        self._captions[caption.id] = caption
        return caption

    async def find_by_id(self, caption_id: CaptionId) -> Optional[Caption]:
        """Find a caption by ID."""
        return self._captions.get(caption_id)

    async def find_public(self) -> list[Caption]:
        """Find public captions, newest first."""
        captions = [c for c in self._captions.values() if c.is_public]
        return sorted(captions, key=lambda c: c.created_datetime_utc, reverse=True)

    async def find_latest_public_by_images(
        self, image_ids: Sequence[ImageId]
    ) -> dict[ImageId, Caption]:
        """Find the newest public caption per image."""
        wanted = set(image_ids)
        latest: dict[ImageId, Caption] = {}
        for caption in await self.find_public():
            if caption.image_id in wanted and caption.image_id not in latest:
                latest[caption.image_id] = caption
        return latest
