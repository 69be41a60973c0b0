"""Request session helpers."""

from fastapi import Request

from gallery.domain.model import Principal
from gallery.domain.service import SessionService

ACCESS_TOKEN_COOKIE = "access_token"


def get_access_token(request: Request) -> str | None:
    """Read the access token from the session cookie or a Bearer header."""
    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if token:
        return token

    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


def get_viewer(request: Request, session_service: SessionService) -> Principal | None:
    """Resolve the request's principal; None when anonymous or the token is bad."""
    return session_service.get_principal_from_token(get_access_token(request))
