"""Profile entity.

Application-level user record that votes reference. Usually shares its ID
with the principal; some deployments link the two through ``user_id``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from gallery.domain.model.common import DomainModel, utc_now
from gallery.domain.value import PrincipalId, ProfileId


class Profile(DomainModel):
    """Profile entity."""

    id: ProfileId
    user_id: Optional[PrincipalId] = None
    created_datetime_utc: datetime = Field(default_factory=utc_now)
