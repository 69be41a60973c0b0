"""Client-side helpers for talking to the gallery API."""

from .vote_control import VoteControl, VoteControlState

__all__ = ["VoteControl", "VoteControlState"]
