"""Per-caption vote control.

Drives the upvote/downvote buttons shown next to a caption: guards the
request, posts it, and keeps a short-lived status message. State moves
``IDLE -> SUBMITTING -> SUCCESS | FAILED -> IDLE``; the terminal states fall
back to ``IDLE`` on their own once their display time has passed.
"""

import asyncio
from enum import Enum
import time
from typing import Callable

import httpx
import logfire

from gallery.domain.value import VoteValue

SIGN_IN_MESSAGE = "Please sign in to vote."
NO_CAPTION_MESSAGE = "No caption yet, you can't vote until a caption exists."
SUCCESS_MESSAGE = "Vote submitted successfully!"
FAILURE_MESSAGE = "Failed to submit vote"

SUCCESS_DISPLAY_SECONDS = 3.0
ERROR_DISPLAY_SECONDS = 5.0


class VoteControlState(str, Enum):
    """Display state of a vote control."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


class VoteControl:
    """Vote buttons for a single caption.

    Args:
        client: HTTP client whose base URL points at the API
        caption_id: Caption to vote on; None when the image has no caption yet
        is_authenticated: Whether the viewer is signed in
        current_vote: The viewer's existing vote, if any
        on_vote_success: Called with the new vote value after a successful vote
        clock: Monotonic time source in seconds
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        caption_id: str | None,
        is_authenticated: bool,
        current_vote: VoteValue | None = None,
        on_vote_success: Callable[[VoteValue], None] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.client = client
        self.caption_id = caption_id
        self.is_authenticated = is_authenticated
        self.current_vote = current_vote
        self.on_vote_success = on_vote_success
        self.clock = clock

        self._state = VoteControlState.IDLE
        self._message: str | None = None
        self._entered_at = clock()

    @property
    def state(self) -> VoteControlState:
        """Current state, expiring SUCCESS and FAILED back to IDLE."""
        elapsed = self.clock() - self._entered_at
        if (
            self._state == VoteControlState.SUCCESS
            and elapsed >= SUCCESS_DISPLAY_SECONDS
        ) or (
            self._state == VoteControlState.FAILED and elapsed >= ERROR_DISPLAY_SECONDS
        ):
            self._set_state(VoteControlState.IDLE)
        return self._state

    @property
    def message(self) -> str | None:
        """Status message to show, None when idle or submitting."""
        if self.state in (VoteControlState.SUCCESS, VoteControlState.FAILED):
            return self._message
        return None

    @property
    def is_upvoted(self) -> bool:
        return self.current_vote == VoteValue.UP

    @property
    def is_downvoted(self) -> bool:
        return self.current_vote == VoteValue.DOWN

    def _set_state(self, state: VoteControlState, message: str | None = None) -> None:
        self._state = state
        self._message = message
        self._entered_at = self.clock()

    async def upvote(self) -> bool:
        return await self.vote(VoteValue.UP)

    async def downvote(self) -> bool:
        return await self.vote(VoteValue.DOWN)

    async def vote(self, direction: VoteValue) -> bool:
        """Submit a vote in the given direction.

        Ignored while a previous submission is still in flight. Any failure
        of the request leaves the control in FAILED.

        Returns:
            True if the vote was stored
        """
        if self._state == VoteControlState.SUBMITTING:
            return False

        if not self.is_authenticated:
            self._set_state(VoteControlState.FAILED, SIGN_IN_MESSAGE)
            return False

        if not self.caption_id:
            self._set_state(VoteControlState.FAILED, NO_CAPTION_MESSAGE)
            return False

        self._set_state(VoteControlState.SUBMITTING)
        try:
            response = await self.client.post(
                f"/api/captions/{self.caption_id}/vote",
                json={"vote_value": int(direction)},
            )
        except asyncio.CancelledError:
            self._set_state(VoteControlState.FAILED, FAILURE_MESSAGE)
            raise
        except httpx.HTTPError as e:
            logfire.warn("Vote request failed", caption_id=self.caption_id, error=str(e))
            self._set_state(VoteControlState.FAILED, FAILURE_MESSAGE)
            return False
        except Exception as e:
            logfire.error(
                "Unexpected error submitting vote",
                caption_id=self.caption_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            self._set_state(VoteControlState.FAILED, FAILURE_MESSAGE)
            return False

        if not response.is_success:
            self._set_state(VoteControlState.FAILED, _error_detail(response))
            return False

        self.current_vote = direction
        self._set_state(VoteControlState.SUCCESS, SUCCESS_MESSAGE)
        if self.on_vote_success:
            self.on_vote_success(direction)
        return True


def _error_detail(response: httpx.Response) -> str:
    try:
        detail = response.json().get("detail")
    except (ValueError, AttributeError):
        return FAILURE_MESSAGE
    return detail if isinstance(detail, str) and detail else FAILURE_MESSAGE
