"""Domain value objects for the gallery."""

from gallery.domain.value.identifiers import (
    CaptionId,
    ImageId,
    PrincipalId,
    ProfileId,
    VoteId,
)
from gallery.domain.value.types import (
    ProfileSource,
    ProviderSession,
    ResolvedProfile,
    VoteValue,
)

__all__ = [
    # Identifiers
    "PrincipalId",
    "ProfileId",
    "ImageId",
    "CaptionId",
    "VoteId",
    # Types
    "VoteValue",
    "ProfileSource",
    "ResolvedProfile",
    "ProviderSession",
]
