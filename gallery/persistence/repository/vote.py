"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, select
from sqlalchemy.dialects.postgresql import Insert, insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.domain.model import Vote
from gallery.domain.repository import VoteRepository
from gallery.domain.value import CaptionId, ProfileId
from gallery.persistence.mappers import row_to_vote, vote_to_dict
from gallery.persistence.tables import caption_votes_table

VOTE_UNIQUE_CONSTRAINT = "uq_caption_votes_profile_caption"


def build_upsert_statement(vote: Vote) -> Insert:
    """Build the INSERT .. ON CONFLICT statement for a vote.

    On conflict only the direction and modified timestamp change; the
    stored id and created timestamp are kept.
    """
    stmt = pg_insert(caption_votes_table).values(**vote_to_dict(vote))
    return stmt.on_conflict_do_update(
        constraint=VOTE_UNIQUE_CONSTRAINT,
        set_={
            "vote_value": stmt.excluded.vote_value,
            "modified_datetime_utc": stmt.excluded.modified_datetime_utc,
        },
    ).returning(*caption_votes_table.c)


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_profile_and_caption(
        self, profile_id: ProfileId, caption_id: CaptionId
    ) -> Optional[Vote]:
        """Find a profile's vote on a caption."""
        stmt = select(caption_votes_table).where(
            and_(
                caption_votes_table.c.profile_id == profile_id,
                caption_votes_table.c.caption_id == caption_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_profile_and_captions(
        self, profile_id: ProfileId, caption_ids: Sequence[CaptionId]
    ) -> List[Vote]:
        """Find a profile's votes on multiple captions (batch query)."""
        if not caption_ids:
            return []

        stmt = select(caption_votes_table).where(
            and_(
                caption_votes_table.c.profile_id == profile_id,
                caption_votes_table.c.caption_id.in_(caption_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert or update a vote in one statement.

        Concurrent submissions for the same key serialize on the unique
        constraint; the last write wins.
        """
        stmt = build_upsert_statement(vote)

        # Savepoint so a failed write leaves the outer transaction usable
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.fetchone()

        return row_to_vote(row._asdict())  # type: ignore[union-attr]
