"""Strongly typed identifiers for gallery domain entities."""

from typing import NewType
from uuid import UUID

PrincipalId = NewType("PrincipalId", UUID)
ProfileId = NewType("ProfileId", UUID)
ImageId = NewType("ImageId", UUID)
CaptionId = NewType("CaptionId", UUID)
VoteId = NewType("VoteId", UUID)
