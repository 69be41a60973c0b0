"""Repository interfaces for the gallery domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from gallery.domain.repository.caption import CaptionRepository
from gallery.domain.repository.image import ImageRepository
from gallery.domain.repository.profile import ProfileRepository
from gallery.domain.repository.vote import VoteRepository

__all__ = [
    "CaptionRepository",
    "ImageRepository",
    "ProfileRepository",
    "VoteRepository",
]
