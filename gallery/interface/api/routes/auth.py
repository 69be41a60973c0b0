"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
import logfire

from gallery.adapter.error import AuthProviderError
from gallery.application.usecase.auth import (
    CompleteSignInRequest,
    CompleteSignInUseCase,
    GetViewerRequest,
    GetViewerResponse,
    GetViewerUseCase,
    SignOutRequest,
    SignOutResponse,
    SignOutUseCase,
)
from gallery.config import Settings
from gallery.domain.error import AuthenticationRequiredError
from gallery.domain.service import SessionService
from gallery.interface.api.session import (
    ACCESS_TOKEN_COOKIE,
    get_access_token,
    get_viewer,
)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


@router.get("/callback")
async def sign_in_callback(
    complete_sign_in_use_case: FromDishka[CompleteSignInUseCase],
    settings: FromDishka[Settings],
    code: str | None = None,
    code_verifier: str | None = None,
) -> RedirectResponse:
    """Handle the auth provider's sign-in redirect.

    Exchanges the code for a session and stores the access token in an
    HTTP-only cookie. The browser always lands on the post-login page; a
    failed exchange is logged and the visitor arrives signed out.

    Example:
        GET /auth/callback?code=abc123

        Redirects to: http://localhost:3000/images
        Sets cookie: access_token
    """
    redirect_response = RedirectResponse(
        url=f"{settings.api.frontend_url}{settings.auth.post_login_path}",
        status_code=status.HTTP_302_FOUND,
    )

    if not code:
        logfire.warn("Sign-in callback without code")
        return redirect_response

    try:
        session = await complete_sign_in_use_case.execute(
            CompleteSignInRequest(code=code, code_verifier=code_verifier)
        )
    except AuthProviderError as e:
        logfire.error("Sign-in code exchange failed", error=str(e))
        return redirect_response

    is_production = settings.environment == "production"
    redirect_response.set_cookie(
        key=ACCESS_TOKEN_COOKIE,
        value=session.access_token,
        httponly=True,
        secure=is_production,
        samesite="lax",
        path="/",
        max_age=session.expires_in or settings.auth.cookie_max_age_seconds,
    )
    logfire.info("Sign-in completed", redirect_url=redirect_response.headers["location"])
    return redirect_response


@router.post("/signout", response_model=SignOutResponse)
async def sign_out(
    request: Request,
    sign_out_use_case: FromDishka[SignOutUseCase],
) -> JSONResponse:
    """End the provider session and clear the session cookie.

    Raises:
        HTTPException: 502 if the provider rejects the sign-out
    """
    try:
        result = await sign_out_use_case.execute(
            SignOutRequest(access_token=get_access_token(request))
        )
    except AuthProviderError as e:
        logfire.error("Sign-out rejected by provider", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Sign-out failed",
        )

    # Cookie must be deleted on the response actually returned
    response = JSONResponse(content=result.model_dump())
    response.delete_cookie(key=ACCESS_TOKEN_COOKIE, path="/")
    return response


@router.get("/me", response_model=GetViewerResponse)
async def get_me(
    request: Request,
    get_viewer_use_case: FromDishka[GetViewerUseCase],
    session_service: FromDishka[SessionService],
) -> GetViewerResponse:
    """Describe the signed-in viewer.

    Raises:
        HTTPException: 401 if not signed in
    """
    try:
        return await get_viewer_use_case.execute(
            GetViewerRequest(viewer=get_viewer(request, session_service))
        )
    except AuthenticationRequiredError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
