"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import uuid4

from gallery.domain.model.vote import Vote
from gallery.domain.repository.vote import VoteRepository
from gallery.domain.value import CaptionId, ProfileId, VoteId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Rows are keyed by (profile_id, caption_id), mirroring the unique
    constraint of the real table.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[ProfileId, CaptionId], Vote] = {}
        self.upsert_calls = 0

    async def find_by_profile_and_caption(
        self, profile_id: ProfileId, caption_id: CaptionId
    ) -> Optional[Vote]:
        """Find a profile's vote on a caption."""
        return self._votes.get((profile_id, caption_id))

    async def find_by_profile_and_captions(
        self, profile_id: ProfileId, caption_ids: Sequence[CaptionId]
    ) -> list[Vote]:
        """Find a profile's votes on multiple captions (batch query)."""
        if not caption_ids:
            return []

        wanted = set(caption_ids)
        return [
            v
            for (owner, caption_id), v in self._votes.items()
            if owner == profile_id and caption_id in wanted
        ]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert or update a vote.

        No await happens between the lookup and the write, so concurrent
        coroutines cannot interleave here.
        """
        self.upsert_calls += 1
        key = (vote.profile_id, vote.caption_id)
        existing = self._votes.get(key)

        if existing:
            saved = existing.model_copy(
                update={
                    "vote_value": vote.vote_value,
                    "modified_datetime_utc": vote.modified_datetime_utc,
                }
            )
        else:
            saved = vote.model_copy(update={"id": vote.id or VoteId(uuid4())})

        self._votes[key] = saved
        return saved

    def all(self) -> list[Vote]:
        """Every stored vote."""
        return list(self._votes.values())
