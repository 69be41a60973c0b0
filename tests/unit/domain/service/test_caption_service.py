"""Unit tests for CaptionService."""

from uuid import uuid4

import pytest

from gallery.domain.repository import CaptionRepository
from gallery.domain.service import CaptionService
from tests.harness import create_env_fixture, make_caption, make_image

unit_env = create_env_fixture()


class TestGetCaptionById:
    @pytest.mark.asyncio
    async def test_returns_existing_caption(self, unit_env):
        caption_service = await unit_env.get(CaptionService)
        caption_repo = await unit_env.get(CaptionRepository)
        caption = caption_repo.add(make_caption())

        assert await caption_service.get_caption_by_id(str(caption.id)) == caption

    @pytest.mark.asyncio
    async def test_unknown_id_returns_none(self, unit_env):
        caption_service = await unit_env.get(CaptionService)

        assert await caption_service.get_caption_by_id(str(uuid4())) is None

    @pytest.mark.asyncio
    async def test_malformed_id_returns_none(self, unit_env):
        caption_service = await unit_env.get(CaptionService)

        assert await caption_service.get_caption_by_id("42") is None


class TestListing:
    @pytest.mark.asyncio
    async def test_public_captions_newest_first(self, unit_env):
        """Only public captions are listed, most recent first."""
        caption_service = await unit_env.get(CaptionService)
        caption_repo = await unit_env.get(CaptionRepository)
        old = caption_repo.add(make_caption(content="old", minutes_ago=30))
        new = caption_repo.add(make_caption(content="new", minutes_ago=1))
        caption_repo.add(make_caption(content="hidden", is_public=False))

        captions = await caption_service.list_public_captions()

        assert [c.id for c in captions] == [new.id, old.id]

    @pytest.mark.asyncio
    async def test_latest_public_caption_per_image(self, unit_env):
        """Each image maps to its newest public caption."""
        caption_service = await unit_env.get(CaptionService)
        caption_repo = await unit_env.get(CaptionRepository)
        image = make_image()
        bare_image = make_image()
        caption_repo.add(make_caption(image, content="first", minutes_ago=10))
        latest = caption_repo.add(make_caption(image, content="second", minutes_ago=5))
        caption_repo.add(make_caption(image, content="draft", is_public=False))

        result = await caption_service.latest_public_captions_for_images(
            [image.id, bare_image.id]
        )

        assert result == {image.id: latest}
