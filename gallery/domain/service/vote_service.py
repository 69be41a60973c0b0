"""Vote domain service."""

from typing import Any, Sequence

import logfire
from sqlalchemy.exc import SQLAlchemyError

from gallery.domain.error import (
    AuthenticationRequiredError,
    NotFoundError,
    StoreWriteError,
    ValidationError,
)
from gallery.domain.model import Principal, Vote
from gallery.domain.model.common import utc_now
from gallery.domain.repository import VoteRepository
from gallery.domain.value import CaptionId, ProfileId, VoteValue

from .base import Service
from .caption_service import CaptionService
from .identity_service import IdentityService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        caption_service: CaptionService,
        identity_service: IdentityService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            caption_service: Caption domain service
            identity_service: Identity resolution service
        """
        self.vote_repository = vote_repository
        self.caption_service = caption_service
        self.identity_service = identity_service

    async def submit_vote(
        self,
        principal: Principal | None,
        caption_id: str | None,
        vote_value: Any,
    ) -> Vote:
        """Create or update the principal's vote on a caption.

        Authentication and input checks run before any store access. The
        write is a single upsert keyed by (profile_id, caption_id); an
        existing row keeps its creation timestamp.

        Args:
            principal: Authenticated principal, None for anonymous callers
            caption_id: Caption ID from the request path
            vote_value: Raw vote value from the request body

        Returns:
            The persisted vote

        Raises:
            AuthenticationRequiredError: If principal is None
            ValidationError: If caption_id is blank or vote_value is not +1/-1
            NotFoundError: If the caption does not exist
            ProfileNotProvisionedError: If no profile exists and fallback is disabled
            StoreWriteError: If the store rejects the upsert
        """
        if principal is None:
            logfire.warn("Vote attempt without authentication", caption_id=caption_id)
            raise AuthenticationRequiredError()

        if not caption_id or not caption_id.strip():
            raise ValidationError("Caption ID is required")

        value = VoteValue.parse(vote_value)

        with logfire.span(
            "vote_service.submit_vote",
            caption_id=caption_id,
            principal_id=str(principal.id),
            vote_value=int(value),
        ):
            caption = await self.caption_service.get_caption_by_id(caption_id)
            if not caption:
                raise NotFoundError("Caption", caption_id)

            resolved = await self.identity_service.resolve(principal)

            existing = await self.vote_repository.find_by_profile_and_caption(
                resolved.profile_id, caption.id
            )

            now = utc_now()
            vote = Vote(
                profile_id=resolved.profile_id,
                caption_id=caption.id,
                vote_value=value,
                created_datetime_utc=existing.created_datetime_utc if existing else now,
                modified_datetime_utc=now,
            )

            try:
                saved_vote = await self.vote_repository.upsert(vote)
            except SQLAlchemyError as e:
                logfire.error(
                    "Error upserting vote",
                    caption_id=caption_id,
                    profile_id=str(resolved.profile_id),
                    profile_source=resolved.source.value,
                    error=str(e),
                )
                raise StoreWriteError("Failed to submit vote") from e

            logfire.info(
                "Vote submitted",
                caption_id=caption_id,
                profile_id=str(saved_vote.profile_id),
                vote_value=int(saved_vote.vote_value),
                updated=existing is not None,
            )
            return saved_vote

    async def get_votes_for_captions(
        self, profile_id: ProfileId, caption_ids: Sequence[CaptionId]
    ) -> dict[CaptionId, VoteValue]:
        """Map captions to the profile's vote on each.

        Args:
            profile_id: Viewer's profile ID
            caption_ids: Captions to check

        Returns:
            Mapping of caption ID to vote value (captions without a vote are absent)
        """
        if not caption_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_profile_and_captions(
            profile_id=profile_id,
            caption_ids=caption_ids,
        )
        return {vote.caption_id: vote.vote_value for vote in votes}
