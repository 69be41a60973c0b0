"""Vote entity.

Each profile holds at most one vote per caption. Re-voting changes the
direction in place; there is no way to remove a vote.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from gallery.domain.model.common import DomainModel, utc_now
from gallery.domain.value import CaptionId, ProfileId, VoteId, VoteValue


class Vote(DomainModel):
    """Caption vote.

    Business rules:
    - One vote per (profile, caption), enforced by a store unique constraint
    - ``created_datetime_utc`` is frozen once the row exists
    - ``modified_datetime_utc`` is refreshed on every submission
    """

    id: Optional[VoteId] = None  # Assigned by the store
    profile_id: ProfileId
    caption_id: CaptionId
    vote_value: VoteValue
    created_datetime_utc: datetime = Field(default_factory=utc_now)
    modified_datetime_utc: datetime = Field(default_factory=utc_now)
