"""Submit vote use case."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.model import Principal, Vote
from gallery.domain.service import VoteService


class SubmitVoteRequest(BaseModel):
    """Submit vote request."""

    principal: Principal | None  # None for anonymous callers
    caption_id: str
    vote_value: Any = None  # Untrusted, validated by the vote service


class VoteItem(BaseModel):
    """Persisted vote in responses."""

    id: str | None
    profile_id: str
    caption_id: str
    vote_value: int
    created_datetime_utc: datetime
    modified_datetime_utc: datetime

    @classmethod
    def from_vote(cls, vote: Vote) -> "VoteItem":
        return cls(
            id=str(vote.id) if vote.id else None,
            profile_id=str(vote.profile_id),
            caption_id=str(vote.caption_id),
            vote_value=int(vote.vote_value),
            created_datetime_utc=vote.created_datetime_utc,
            modified_datetime_utc=vote.modified_datetime_utc,
        )


class SubmitVoteResponse(BaseModel):
    """Submit vote response."""

    success: bool
    message: str
    vote: VoteItem


class SubmitVoteUseCase(BaseUseCase[SubmitVoteRequest, SubmitVoteResponse]):
    """Use case for upvoting or downvoting a caption."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize submit vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: SubmitVoteRequest) -> SubmitVoteResponse:
        """Execute submit vote flow.

        Args:
            request: Submit vote request

        Returns:
            Submit vote response with the persisted vote

        Raises:
            DomainError: Any of the vote service's failures
        """
        vote = await self.vote_service.submit_vote(
            principal=request.principal,
            caption_id=request.caption_id,
            vote_value=request.vote_value,
        )

        return SubmitVoteResponse(
            success=True,
            message="Vote submitted successfully",
            vote=VoteItem.from_vote(vote),
        )
