"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from civicsync.application.usecase.base import BaseUseCase, CamelModel
from civicsync.domain.service import VoteService
from civicsync.domain.value import IssueId, UserId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    issue_id: str
    user_id: str  # From the verified token


class CastVoteResponse(CamelModel):
    """Cast vote response."""

    message: str = "Vote recorded successfully"
    vote_count: int


class CastVoteUseCase(BaseUseCase):
    """Use case for upvoting an issue."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute vote flow.

        Raises:
            NotFoundError: If the issue doesn't exist
            DuplicateVoteError: If the user already voted on it
        """
        issue = await self.vote_service.cast_vote(
            IssueId(UUID(request.issue_id)), UserId(UUID(request.user_id))
        )
        return CastVoteResponse(vote_count=issue.vote_count)
