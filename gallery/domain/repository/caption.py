"""Caption repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from gallery.domain.model.caption import Caption
from gallery.domain.value import CaptionId, ImageId


class CaptionRepository(ABC):
    """Repository for Caption entity (read-only)."""

    @abstractmethod
    async def find_by_id(self, caption_id: CaptionId) -> Optional[Caption]:
        """Find a caption by ID.

        Args:
            caption_id: The caption's unique identifier

        Returns:
            The caption if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_public(self) -> List[Caption]:
        """Find all public captions, most recent first.

        Returns:
            List of public captions
        """
        pass

    @abstractmethod
    async def find_latest_public_by_images(
        self, image_ids: Sequence[ImageId]
    ) -> Dict[ImageId, Caption]:
        """Find the most recent public caption of each image (batch query).

        Args:
            image_ids: Images to look up

        Returns:
            Mapping of image ID to its latest public caption; images without
            one are absent
        """
        pass
