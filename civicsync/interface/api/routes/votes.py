"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status

from civicsync.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from civicsync.domain.error import DuplicateVoteError, NotFoundError
from civicsync.domain.service import JWTService
from civicsync.interface.api.routes.issues import ISSUE_NOT_FOUND, parse_issue_id
from civicsync.interface.api.security import authenticate

router = APIRouter(prefix="/api/issues", tags=["votes"], route_class=DishkaRoute)


@router.post("/{issue_id}/vote", response_model=CastVoteResponse)
async def vote_on_issue(
    issue_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CastVoteResponse:
    """Upvote an issue. Each user may vote on an issue once.

    Args:
        issue_id: Issue UUID
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header

    Returns:
        The issue's new vote count

    Raises:
        HTTPException: If not authenticated, already voted, or issue not found
    """
    payload = authenticate(jwt_service, authorization)

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                issue_id=str(parse_issue_id(issue_id)), user_id=payload.user_id
            )
        )
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ISSUE_NOT_FOUND)
    except DuplicateVoteError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You have already voted on this issue",
        )
