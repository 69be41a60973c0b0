"""Domain model entities for the gallery."""

from gallery.domain.model.caption import Caption
from gallery.domain.model.image import Image
from gallery.domain.model.principal import Principal
from gallery.domain.model.profile import Profile
from gallery.domain.model.vote import Vote

__all__ = [
    "Caption",
    "Image",
    "Principal",
    "Profile",
    "Vote",
]
