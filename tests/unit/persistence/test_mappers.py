"""Unit tests for row mappers."""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from gallery.domain.value import VoteValue
from gallery.persistence.mappers import row_to_caption, row_to_profile, row_to_vote

NOW = datetime(2026, 1, 5, 12, 0, tzinfo=timezone.utc)


class TestRowToVote:
    def test_maps_string_uuids_and_direction(self):
        vote_id, profile_id, caption_id = uuid4(), uuid4(), uuid4()

        vote = row_to_vote(
            {
                "id": str(vote_id),
                "profile_id": str(profile_id),
                "caption_id": caption_id,
                "vote_value": -1,
                "created_datetime_utc": NOW,
                "modified_datetime_utc": NOW,
            }
        )

        assert vote.id == vote_id
        assert vote.profile_id == profile_id
        assert vote.caption_id == caption_id
        assert vote.vote_value == VoteValue.DOWN


class TestRowToCaption:
    def test_null_columns_become_defaults(self):
        caption_id = uuid4()

        caption = row_to_caption(
            {
                "id": caption_id,
                "content": None,
                "image_id": None,
                "profile_id": None,
                "is_public": None,
                "like_count": None,
                "created_datetime_utc": NOW,
            }
        )

        assert caption.id == caption_id
        assert caption.image_id is None
        assert caption.is_public is False
        assert caption.like_count == 0


class TestRowToProfile:
    def test_optional_user_link(self):
        profile_id = uuid4()
        user_id = "0b8f3c1e-58c4-4a4e-9d0f-3f4a1c2b7e90"

        profile = row_to_profile(
            {"id": profile_id, "user_id": user_id, "created_datetime_utc": NOW}
        )

        assert profile.id == profile_id
        assert profile.user_id == UUID(user_id)
