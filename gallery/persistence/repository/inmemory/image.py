"""In-memory image repository for testing."""

from gallery.domain.model.image import Image
from gallery.domain.repository.image import ImageRepository
from gallery.domain.value import ImageId


class InMemoryImageRepository(ImageRepository):
    """In-memory implementation of ImageRepository for testing."""

    def __init__(self) -> None:
        self._images: dict[ImageId, Image] = {}

    def add(self, image: Image) -> Image:
        """Seed an image."""
        self._images[image.id] = image
        return image

    async def find_public(self) -> list[Image]:
        """Find public images, newest first."""
        images = [i for i in self._images.values() if i.is_public]
        return sorted(images, key=lambda i: i.created_datetime_utc, reverse=True)
