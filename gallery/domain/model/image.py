"""Image entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from gallery.domain.model.common import DomainModel, utc_now
from gallery.domain.value import ImageId


class Image(DomainModel):
    """Gallery image. Storage and delivery of the file itself live elsewhere."""

    id: ImageId
    url: Optional[str] = None
    image_description: Optional[str] = None
    additional_context: Optional[str] = None
    celebrity_recognition: Optional[str] = None
    is_public: bool = False
    is_common_use: bool = False
    created_datetime_utc: datetime = Field(default_factory=utc_now)
    modified_datetime_utc: Optional[datetime] = None
