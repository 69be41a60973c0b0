"""Vote use cases."""

from .submit_vote import (
    SubmitVoteRequest,
    SubmitVoteResponse,
    SubmitVoteUseCase,
    VoteItem,
)

__all__ = [
    "SubmitVoteRequest",
    "SubmitVoteResponse",
    "SubmitVoteUseCase",
    "VoteItem",
]
