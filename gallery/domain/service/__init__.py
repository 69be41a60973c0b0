"""Domain services."""

from .auth_service import AuthProviderClient, AuthService
from .base import Service
from .caption_service import CaptionService
from .identity_service import IdentityService
from .image_service import ImageService
from .session_service import SessionService
from .vote_service import VoteService

__all__ = [
    "AuthProviderClient",
    "AuthService",
    "CaptionService",
    "IdentityService",
    "ImageService",
    "Service",
    "SessionService",
    "VoteService",
]
