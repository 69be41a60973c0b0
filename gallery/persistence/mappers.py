"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from gallery.domain.model import Caption, Image, Profile, Vote
from gallery.domain.value import (
    CaptionId,
    ImageId,
    PrincipalId,
    ProfileId,
    VoteId,
    VoteValue,
)


def _uuid(value: Any) -> Optional[UUID]:
    """Normalize a UUID column value (drivers may hand back strings)."""
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    user_id = _uuid(row.get("user_id"))
    return Profile(
        id=ProfileId(_uuid(row["id"])),
        user_id=PrincipalId(user_id) if user_id else None,
        created_datetime_utc=row["created_datetime_utc"],
    )


def row_to_image(row: Dict[str, Any]) -> Image:
    """Convert database row to Image domain model."""
    return Image(
        id=ImageId(_uuid(row["id"])),
        url=row.get("url"),
        image_description=row.get("image_description"),
        additional_context=row.get("additional_context"),
        celebrity_recognition=row.get("celebrity_recognition"),
        is_public=bool(row.get("is_public")),
        is_common_use=bool(row.get("is_common_use")),
        created_datetime_utc=row["created_datetime_utc"],
        modified_datetime_utc=row.get("modified_datetime_utc"),
    )


def row_to_caption(row: Dict[str, Any]) -> Caption:
    """Convert database row to Caption domain model."""
    image_id = _uuid(row.get("image_id"))
    profile_id = _uuid(row.get("profile_id"))
    return Caption(
        id=CaptionId(_uuid(row["id"])),
        content=row.get("content"),
        image_id=ImageId(image_id) if image_id else None,
        profile_id=ProfileId(profile_id) if profile_id else None,
        is_public=bool(row.get("is_public")),
        like_count=row.get("like_count") or 0,
        created_datetime_utc=row["created_datetime_utc"],
    )


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        profile_id=ProfileId(_uuid(row["profile_id"])),
        caption_id=CaptionId(_uuid(row["caption_id"])),
        vote_value=VoteValue(row["vote_value"]),
        created_datetime_utc=row["created_datetime_utc"],
        modified_datetime_utc=row["modified_datetime_utc"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to an insert dict.

    The ``id`` is left to the database default.
    """
    return {
        "profile_id": vote.profile_id,
        "caption_id": vote.caption_id,
        "vote_value": int(vote.vote_value),
        "created_datetime_utc": vote.created_datetime_utc,
        "modified_datetime_utc": vote.modified_datetime_utc,
    }
