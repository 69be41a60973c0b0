"""Authentication use cases."""

from .complete_sign_in import (
    CompleteSignInRequest,
    CompleteSignInResponse,
    CompleteSignInUseCase,
)
from .get_viewer import GetViewerRequest, GetViewerResponse, GetViewerUseCase
from .sign_out import SignOutRequest, SignOutResponse, SignOutUseCase

__all__ = [
    "CompleteSignInRequest",
    "CompleteSignInResponse",
    "CompleteSignInUseCase",
    "GetViewerRequest",
    "GetViewerResponse",
    "GetViewerUseCase",
    "SignOutRequest",
    "SignOutResponse",
    "SignOutUseCase",
]
