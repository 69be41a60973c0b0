"""Caption routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from gallery.application.usecase.caption import (
    ListCaptionsRequest,
    ListCaptionsResponse,
    ListCaptionsUseCase,
)
from gallery.domain.service import SessionService
from gallery.interface.api.session import get_viewer

router = APIRouter(prefix="/api", tags=["captions"], route_class=DishkaRoute)


@router.get("/captions", response_model=ListCaptionsResponse)
async def list_captions(
    request: Request,
    list_captions_use_case: FromDishka[ListCaptionsUseCase],
    session_service: FromDishka[SessionService],
) -> ListCaptionsResponse:
    """List public captions, newest first.

    Anonymous callers get every ``current_vote`` as null.
    """
    viewer = get_viewer(request, session_service)
    return await list_captions_use_case.execute(ListCaptionsRequest(viewer=viewer))
