"""Caption entity.

Captions are the votable content items of the gallery.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from gallery.domain.model.common import DomainModel, utc_now
from gallery.domain.value import CaptionId, ImageId, ProfileId


class Caption(DomainModel):
    """Caption attached to an image.

    Read-only from this service's perspective; ``like_count`` is a
    denormalized counter maintained by the store.
    """

    id: CaptionId
    content: Optional[str] = None
    image_id: Optional[ImageId] = None
    profile_id: Optional[ProfileId] = None
    is_public: bool = False
    like_count: int = Field(default=0)
    created_datetime_utc: datetime = Field(default_factory=utc_now)
