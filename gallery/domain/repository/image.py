"""Image repository interface."""

from abc import ABC, abstractmethod
from typing import List

from gallery.domain.model.image import Image


class ImageRepository(ABC):
    """Repository for Image entity (read-only)."""

    @abstractmethod
    async def find_public(self) -> List[Image]:
        """Find all public images, most recent first.

        Returns:
            List of public images
        """
        pass
