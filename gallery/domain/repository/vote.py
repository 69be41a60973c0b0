"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from gallery.domain.model.vote import Vote
from gallery.domain.value import CaptionId, ProfileId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Votes are keyed by (profile_id, caption_id). Rows are only ever
    inserted or updated through ``upsert``.
    """

    @abstractmethod
    async def find_by_profile_and_caption(
        self, profile_id: ProfileId, caption_id: CaptionId
    ) -> Optional[Vote]:
        """Find a profile's vote on a caption.

        Args:
            profile_id: The voting profile
            caption_id: The caption voted on

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_profile_and_captions(
        self, profile_id: ProfileId, caption_ids: Sequence[CaptionId]
    ) -> List[Vote]:
        """Find a profile's votes on multiple captions (batch query).

        Args:
            profile_id: The voting profile
            caption_ids: Captions to check

        Returns:
            Votes by the profile on the given captions
        """
        pass

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or update the existing one for the same key.

        On conflict only ``vote_value`` and ``modified_datetime_utc`` are
        written; the stored ``created_datetime_utc`` and ``id`` are kept.

        Args:
            vote: The vote to persist

        Returns:
            The row as persisted

        Raises:
            SQLAlchemyError: If the store rejects the write
        """
        pass
