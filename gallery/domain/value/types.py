"""Domain value objects for the gallery.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

from enum import Enum, IntEnum
from typing import Any

from gallery.domain.error import ValidationError
from gallery.domain.value.common import ValueObject
from gallery.domain.value.identifiers import ProfileId

MISSING_VOTE_VALUE_MESSAGE = "vote_value is required and must be a number (1 or -1)"
INVALID_VOTE_VALUE_MESSAGE = "Invalid vote_value. Must be 1 or -1"


class VoteValue(IntEnum):
    """Direction of a vote.

    There is no abstention state and no magnitude.
    """

    UP = 1
    DOWN = -1

    @classmethod
    def parse(cls, raw: Any) -> "VoteValue":
        """Parse an untrusted vote value from a request body.

        Accepts JSON numbers equal to 1 or -1. Booleans, strings and missing
        values are rejected even when they would coerce to a number.

        Raises:
            ValidationError: If the value is missing, not a number, or not +/-1
        """
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise ValidationError(MISSING_VOTE_VALUE_MESSAGE)
        if raw == 1:
            return cls.UP
        if raw == -1:
            return cls.DOWN
        raise ValidationError(INVALID_VOTE_VALUE_MESSAGE)


class ProfileSource(str, Enum):
    """How a principal's profile was resolved."""

    DIRECT = "direct"  # profiles.id == principal id
    LINKED = "linked"  # profiles.user_id == principal id
    FALLBACK = "fallback"  # no row found, profile id assumed equal to principal id


class ResolvedProfile(ValueObject):
    """Result of identity resolution."""

    profile_id: ProfileId
    source: ProfileSource

    @property
    def is_fallback(self) -> bool:
        return self.source == ProfileSource.FALLBACK


class ProviderSession(ValueObject):
    """Session issued by the auth provider after a code exchange."""

    access_token: str
    refresh_token: str | None = None
    expires_in: int | None = None
    token_type: str = "bearer"
