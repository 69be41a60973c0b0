"""PostgreSQL implementation of Image repository."""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.domain.model import Image
from gallery.domain.repository import ImageRepository
from gallery.persistence.mappers import row_to_image
from gallery.persistence.tables import images_table


class PostgresImageRepository(ImageRepository):
    """PostgreSQL implementation of ImageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_public(self) -> List[Image]:
        """Find public images, newest first."""
        stmt = (
            select(images_table)
            .where(images_table.c.is_public.is_(True))
            .order_by(images_table.c.created_datetime_utc.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_image(row._asdict()) for row in result.fetchall()]
