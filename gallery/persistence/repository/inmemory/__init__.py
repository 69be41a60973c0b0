"""In-memory repository implementations for testing."""

from .caption import InMemoryCaptionRepository
from .image import InMemoryImageRepository
from .profile import InMemoryProfileRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCaptionRepository",
    "InMemoryImageRepository",
    "InMemoryProfileRepository",
    "InMemoryVoteRepository",
]
