"""Vote routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
import logfire

from gallery.application.usecase.vote import (
    SubmitVoteRequest,
    SubmitVoteResponse,
    SubmitVoteUseCase,
)
from gallery.domain.error import (
    AuthenticationRequiredError,
    NotFoundError,
    ProfileNotProvisionedError,
    StoreWriteError,
    ValidationError,
)
from gallery.domain.service import SessionService
from gallery.interface.api.session import get_viewer

router = APIRouter(prefix="/api", tags=["votes"], route_class=DishkaRoute)


async def _read_vote_value(request: Request) -> Any:
    """Pull ``vote_value`` out of the JSON body.

    A malformed or non-object body yields None, which the vote service
    rejects as a missing value.
    """
    try:
        payload = await request.json()
    except ValueError:
        return None
    return payload.get("vote_value") if isinstance(payload, dict) else None


@router.post(
    "/captions/{caption_id}/vote",
    response_model=SubmitVoteResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": {
                        "type": "object",
                        "properties": {"vote_value": {"type": "integer", "enum": [1, -1]}},
                        "required": ["vote_value"],
                    }
                }
            },
        }
    },
)
async def submit_vote(
    caption_id: str,
    request: Request,
    submit_vote_use_case: FromDishka[SubmitVoteUseCase],
    session_service: FromDishka[SessionService],
) -> SubmitVoteResponse:
    """Upvote or downvote a caption.

    Requires authentication. Re-voting replaces the previous direction.

    Args:
        caption_id: Caption UUID
        request: Incoming request (session cookie/header and JSON body)
        submit_vote_use_case: Submit vote use case from DI
        session_service: Session service for token verification (injected)

    Returns:
        Success message and the persisted vote

    Raises:
        HTTPException: 400/401/403/404 for caller errors, 500 otherwise
    """
    principal = get_viewer(request, session_service)
    vote_value = await _read_vote_value(request)

    try:
        return await submit_vote_use_case.execute(
            SubmitVoteRequest(
                principal=principal,
                caption_id=caption_id,
                vote_value=vote_value,
            )
        )
    except AuthenticationRequiredError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Caption not found"
        )
    except ProfileNotProvisionedError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="No profile is provisioned for this account",
        )
    except StoreWriteError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )
    except Exception as e:
        logfire.error(
            "Unexpected error submitting vote", caption_id=caption_id, error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
