"""PostgreSQL implementation of Caption repository."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.domain.model import Caption
from gallery.domain.repository import CaptionRepository
from gallery.domain.value import CaptionId, ImageId
from gallery.persistence.mappers import row_to_caption
from gallery.persistence.tables import captions_table


class PostgresCaptionRepository(CaptionRepository):
    """PostgreSQL implementation of CaptionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, caption_id: CaptionId) -> Optional[Caption]:
        """Find a caption by ID."""
        stmt = select(captions_table).where(captions_table.c.id == caption_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_caption(row._asdict()) if row else None

    async def find_public(self) -> List[Caption]:
        """Find public captions, newest first."""
        stmt = (
            select(captions_table)
            .where(captions_table.c.is_public.is_(True))
            .order_by(captions_table.c.created_datetime_utc.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_caption(row._asdict()) for row in result.fetchall()]

    async def find_latest_public_by_images(
        self, image_ids: Sequence[ImageId]
    ) -> Dict[ImageId, Caption]:
        """Find the newest public caption per image (batch query)."""
        if not image_ids:
            return {}

        # DISTINCT ON keeps the first row of each image group
        stmt = (
            select(captions_table)
            .where(
                and_(
                    captions_table.c.image_id.in_(image_ids),
                    captions_table.c.is_public.is_(True),
                )
            )
            .distinct(captions_table.c.image_id)
            .order_by(
                captions_table.c.image_id,
                captions_table.c.created_datetime_utc.desc(),
            )
        )
        result = await self.session.execute(stmt)
        captions = [row_to_caption(row._asdict()) for row in result.fetchall()]
        return {caption.image_id: caption for caption in captions if caption.image_id}
