"""PostgreSQL repository implementations."""

from gallery.persistence.repository.caption import PostgresCaptionRepository
from gallery.persistence.repository.image import PostgresImageRepository
from gallery.persistence.repository.profile import PostgresProfileRepository
from gallery.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresProfileRepository",
    "PostgresImageRepository",
    "PostgresCaptionRepository",
    "PostgresVoteRepository",
]
