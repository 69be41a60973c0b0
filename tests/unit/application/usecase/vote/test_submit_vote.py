"""Unit tests for SubmitVoteUseCase."""

from uuid import uuid4

import pytest

from gallery.application.usecase.vote import SubmitVoteRequest, SubmitVoteUseCase
from gallery.domain.error import AuthenticationRequiredError, NotFoundError
from gallery.domain.repository import CaptionRepository
from tests.harness import create_env_fixture, make_caption, make_principal

unit_env = create_env_fixture()


class TestSubmitVoteUseCase:
    """Tests for the submit vote flow."""

    @pytest.mark.asyncio
    async def test_returns_success_envelope(self, unit_env):
        """A stored vote should come back with the success message."""
        # Arrange
        use_case = await unit_env.get(SubmitVoteUseCase)
        caption_repo = await unit_env.get(CaptionRepository)
        caption = caption_repo.add(make_caption())
        principal = make_principal()

        # Act
        response = await use_case.execute(
            SubmitVoteRequest(
                principal=principal, caption_id=str(caption.id), vote_value=-1
            )
        )

        # Assert
        assert response.success is True
        assert response.message == "Vote submitted successfully"
        assert response.vote.vote_value == -1
        assert response.vote.caption_id == str(caption.id)
        assert response.vote.profile_id == str(principal.id)
        assert response.vote.id is not None

    @pytest.mark.asyncio
    async def test_anonymous_request_raises(self, unit_env):
        use_case = await unit_env.get(SubmitVoteUseCase)

        with pytest.raises(AuthenticationRequiredError):
            await use_case.execute(
                SubmitVoteRequest(principal=None, caption_id=str(uuid4()), vote_value=1)
            )

    @pytest.mark.asyncio
    async def test_unknown_caption_raises(self, unit_env):
        use_case = await unit_env.get(SubmitVoteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                SubmitVoteRequest(
                    principal=make_principal(), caption_id=str(uuid4()), vote_value=1
                )
            )
