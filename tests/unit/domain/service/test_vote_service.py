"""Unit tests for VoteService."""

import asyncio
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy.exc import SQLAlchemyError

from gallery.config import IdentitySettings
from gallery.domain.error import (
    AuthenticationRequiredError,
    NotFoundError,
    ProfileNotProvisionedError,
    StoreWriteError,
    ValidationError,
)
from gallery.domain.model import Vote
from gallery.domain.repository import (
    CaptionRepository,
    ProfileRepository,
    VoteRepository,
)
from gallery.domain.service import CaptionService, IdentityService, VoteService
from gallery.domain.value import VoteValue
from gallery.persistence.repository.inmemory import (
    InMemoryCaptionRepository,
    InMemoryProfileRepository,
    InMemoryVoteRepository,
)
from tests.harness import create_env_fixture, make_caption, make_principal, make_profile

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class FailingVoteRepository(InMemoryVoteRepository):
    """Vote repository whose writes always fail."""

    async def upsert(self, vote: Vote) -> Vote:
        raise SQLAlchemyError("connection reset by peer")


class TestSubmitVote:
    """Tests for submit_vote method."""

    @pytest.mark.asyncio
    async def test_first_vote_creates_row(self, unit_env):
        """First vote should insert one row with matching timestamps."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        caption_repo = await unit_env.get(CaptionRepository)
        vote_repo = await unit_env.get(VoteRepository)
        caption = caption_repo.add(make_caption())
        principal = make_principal()

        # Act
        vote = await vote_service.submit_vote(principal, str(caption.id), 1)

        # Assert
        assert vote.vote_value == VoteValue.UP
        assert vote.caption_id == caption.id
        assert vote.profile_id == principal.id  # fallback: profile id == principal id
        assert vote.id is not None
        assert vote.created_datetime_utc == vote.modified_datetime_utc
        assert vote_repo.all() == [vote]

    @pytest.mark.asyncio
    async def test_revote_preserves_created_and_updates_direction(self, unit_env):
        """Re-voting should keep created timestamp and row, change direction."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        caption_repo = await unit_env.get(CaptionRepository)
        vote_repo = await unit_env.get(VoteRepository)
        caption = caption_repo.add(make_caption())
        principal = make_principal()

        t1 = datetime.now(timezone.utc) - timedelta(days=1)
        first = await vote_repo.upsert(
            Vote(
                profile_id=principal.id,
                caption_id=caption.id,
                vote_value=VoteValue.UP,
                created_datetime_utc=t1,
                modified_datetime_utc=t1,
            )
        )

        # Act
        second = await vote_service.submit_vote(principal, str(caption.id), -1)

        # Assert
        assert second.id == first.id
        assert second.vote_value == VoteValue.DOWN
        assert second.created_datetime_utc == t1
        assert second.modified_datetime_utc > t1
        assert len(vote_repo.all()) == 1

    @pytest.mark.asyncio
    async def test_repeated_submissions_keep_one_row(self, unit_env):
        """Any number of submissions should leave exactly one row."""
        vote_service = await unit_env.get(VoteService)
        caption_repo = await unit_env.get(CaptionRepository)
        vote_repo = await unit_env.get(VoteRepository)
        caption = caption_repo.add(make_caption())
        principal = make_principal()

        for value in (1, -1, 1, 1, -1):
            await vote_service.submit_vote(principal, str(caption.id), value)

        votes = vote_repo.all()
        assert len(votes) == 1
        assert votes[0].vote_value == VoteValue.DOWN

    @pytest.mark.asyncio
    async def test_vote_zero_rejected_before_store(self, unit_env):
        """vote_value 0 should be rejected and write nothing."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        caption_repo = await unit_env.get(CaptionRepository)
        vote_repo = await unit_env.get(VoteRepository)
        caption = caption_repo.add(make_caption())

        # Act & Assert
        with pytest.raises(ValidationError, match="Invalid vote_value. Must be 1 or -1"):
            await vote_service.submit_vote(make_principal(), str(caption.id), 0)

        assert vote_repo.upsert_calls == 0
        assert vote_repo.all() == []

    @pytest.mark.parametrize("raw", [None, "1", True, [1], {"value": 1}])
    @pytest.mark.asyncio
    async def test_non_numeric_vote_value_rejected(self, unit_env, raw):
        """Missing or non-numeric vote values should be rejected."""
        vote_service = await unit_env.get(VoteService)
        caption_repo = await unit_env.get(CaptionRepository)
        vote_repo = await unit_env.get(VoteRepository)
        caption = caption_repo.add(make_caption())

        with pytest.raises(ValidationError, match="vote_value is required"):
            await vote_service.submit_vote(make_principal(), str(caption.id), raw)

        assert vote_repo.upsert_calls == 0

    @pytest.mark.asyncio
    async def test_float_equal_to_one_accepted(self, unit_env):
        """A JSON number 1.0 should count as an upvote."""
        vote_service = await unit_env.get(VoteService)
        caption_repo = await unit_env.get(CaptionRepository)
        caption = caption_repo.add(make_caption())

        vote = await vote_service.submit_vote(make_principal(), str(caption.id), 1.0)

        assert vote.vote_value == VoteValue.UP

    @pytest.mark.asyncio
    async def test_unauthenticated_rejected_before_store(self, unit_env):
        """Anonymous callers should be rejected without touching the store."""
        vote_service = await unit_env.get(VoteService)
        caption_repo = await unit_env.get(CaptionRepository)
        vote_repo = await unit_env.get(VoteRepository)
        caption = caption_repo.add(make_caption())

        with pytest.raises(AuthenticationRequiredError, match="Authentication required"):
            await vote_service.submit_vote(None, str(caption.id), 1)

        assert vote_repo.upsert_calls == 0

    @pytest.mark.asyncio
    async def test_authentication_checked_before_vote_value(self, unit_env):
        """An anonymous caller with a bad value still gets the auth error."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(AuthenticationRequiredError):
            await vote_service.submit_vote(None, str(uuid4()), 0)

    @pytest.mark.parametrize("caption_id", ["", "   ", None])
    @pytest.mark.asyncio
    async def test_blank_caption_id_rejected(self, unit_env, caption_id):
        """Blank caption IDs should be rejected."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(ValidationError, match="Caption ID is required"):
            await vote_service.submit_vote(make_principal(), caption_id, 1)

    @pytest.mark.asyncio
    async def test_nonexistent_caption_raises_not_found(self, unit_env):
        """Voting on a missing caption should raise NotFoundError."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)

        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.submit_vote(make_principal(), str(uuid4()), 1)

        assert exc_info.value.resource == "Caption"
        assert vote_repo.upsert_calls == 0

    @pytest.mark.asyncio
    async def test_malformed_caption_id_raises_not_found(self, unit_env):
        """Caption IDs that are not UUIDs cannot exist."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await vote_service.submit_vote(make_principal(), "not-a-uuid", 1)

    @pytest.mark.asyncio
    async def test_vote_recorded_under_linked_profile(self, unit_env):
        """A profile linked through user_id should own the vote."""
        vote_service = await unit_env.get(VoteService)
        caption_repo = await unit_env.get(CaptionRepository)
        profile_repo = await unit_env.get(ProfileRepository)
        caption = caption_repo.add(make_caption())
        principal = make_principal()
        profile = profile_repo.add(make_profile(principal, linked=True))

        vote = await vote_service.submit_vote(principal, str(caption.id), -1)

        assert vote.profile_id == profile.id
        assert vote.profile_id != principal.id

    @pytest.mark.asyncio
    async def test_two_profiles_voting_concurrently_create_two_rows(self, unit_env):
        """Concurrent votes from different profiles should not collide."""
        vote_service = await unit_env.get(VoteService)
        caption_repo = await unit_env.get(CaptionRepository)
        vote_repo = await unit_env.get(VoteRepository)
        caption = caption_repo.add(make_caption())
        alice, bob = make_principal(), make_principal()

        await asyncio.gather(
            vote_service.submit_vote(alice, str(caption.id), 1),
            vote_service.submit_vote(bob, str(caption.id), -1),
        )

        votes = [v for v in vote_repo.all() if v.caption_id == caption.id]
        assert len(votes) == 2
        assert {v.profile_id for v in votes} == {alice.id, bob.id}

    @pytest.mark.asyncio
    async def test_same_profile_concurrent_votes_keep_one_row(self, unit_env):
        """Concurrent votes by one profile should converge on a single row."""
        vote_service = await unit_env.get(VoteService)
        caption_repo = await unit_env.get(CaptionRepository)
        vote_repo = await unit_env.get(VoteRepository)
        caption = caption_repo.add(make_caption())
        principal = make_principal()

        await asyncio.gather(
            *(
                vote_service.submit_vote(principal, str(caption.id), value)
                for value in (1, -1, 1, -1)
            )
        )

        assert len([v for v in vote_repo.all() if v.caption_id == caption.id]) == 1


class TestSubmitVoteFailures:
    """Failure paths that need hand-built services."""

    @pytest.mark.asyncio
    async def test_store_failure_raises_store_write_error(self):
        """Store errors should surface as StoreWriteError."""
        # Arrange
        caption_repo = InMemoryCaptionRepository()
        caption = caption_repo.add(make_caption())
        vote_service = VoteService(
            vote_repository=FailingVoteRepository(),
            caption_service=CaptionService(caption_repo),
            identity_service=IdentityService(
                InMemoryProfileRepository(), IdentitySettings()
            ),
        )

        # Act & Assert
        with pytest.raises(StoreWriteError, match="Failed to submit vote"):
            await vote_service.submit_vote(make_principal(), str(caption.id), 1)

    @pytest.mark.asyncio
    async def test_unprovisioned_profile_rejected_when_fallback_disabled(self):
        """Without fallback, a principal with no profile cannot vote."""
        caption_repo = InMemoryCaptionRepository()
        vote_repo = InMemoryVoteRepository()
        caption = caption_repo.add(make_caption())
        vote_service = VoteService(
            vote_repository=vote_repo,
            caption_service=CaptionService(caption_repo),
            identity_service=IdentityService(
                InMemoryProfileRepository(),
                IdentitySettings(allow_profile_fallback=False),
            ),
        )

        with pytest.raises(ProfileNotProvisionedError):
            await vote_service.submit_vote(make_principal(), str(caption.id), 1)

        assert vote_repo.all() == []


class TestGetVotesForCaptions:
    """Tests for get_votes_for_captions method."""

    @pytest.mark.asyncio
    async def test_maps_only_voted_captions(self, unit_env):
        """Captions without a vote should be absent from the mapping."""
        vote_service = await unit_env.get(VoteService)
        caption_repo = await unit_env.get(CaptionRepository)
        voted = caption_repo.add(make_caption())
        untouched = caption_repo.add(make_caption())
        principal = make_principal()
        await vote_service.submit_vote(principal, str(voted.id), -1)

        votes = await vote_service.get_votes_for_captions(
            principal.id, [voted.id, untouched.id]
        )

        assert votes == {voted.id: VoteValue.DOWN}

    @pytest.mark.asyncio
    async def test_empty_caption_list_returns_empty_mapping(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        assert await vote_service.get_votes_for_captions(make_principal().id, []) == {}
