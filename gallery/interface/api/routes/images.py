"""Image routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status

from gallery.application.usecase.image import (
    ListImagesRequest,
    ListImagesResponse,
    ListImagesUseCase,
)
from gallery.domain.error import AuthenticationRequiredError
from gallery.domain.service import SessionService
from gallery.interface.api.session import get_viewer

router = APIRouter(prefix="/api", tags=["images"], route_class=DishkaRoute)


@router.get("/images", response_model=ListImagesResponse)
async def list_images(
    request: Request,
    list_images_use_case: FromDishka[ListImagesUseCase],
    session_service: FromDishka[SessionService],
) -> ListImagesResponse:
    """List public images with their latest caption.

    Requires authentication.

    Raises:
        HTTPException: 401 if not signed in
    """
    viewer = get_viewer(request, session_service)
    try:
        return await list_images_use_case.execute(ListImagesRequest(viewer=viewer))
    except AuthenticationRequiredError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
