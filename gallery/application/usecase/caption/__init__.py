"""Caption use cases."""

from .list_captions import (
    CaptionListItem,
    ListCaptionsRequest,
    ListCaptionsResponse,
    ListCaptionsUseCase,
)

__all__ = [
    "CaptionListItem",
    "ListCaptionsRequest",
    "ListCaptionsResponse",
    "ListCaptionsUseCase",
]
