"""Get issue use case."""

from uuid import UUID

from pydantic import BaseModel

from civicsync.application.usecase.base import BaseUseCase, CamelModel
from civicsync.domain.service import IssueService
from civicsync.domain.value import IssueId, UserId

from .common import IssueDecorator, IssueDetail


class GetIssueRequest(BaseModel):
    """Get issue request."""

    issue_id: str
    user_id: str  # Viewer


class GetIssueResponse(CamelModel):
    """Get issue response."""

    issue: IssueDetail


class GetIssueUseCase(BaseUseCase):
    """Use case for fetching one issue."""

    def __init__(self, issue_service: IssueService, decorator: IssueDecorator) -> None:
        """Initialize get issue use case.

        Args:
            issue_service: Issue domain service
            decorator: Adds owner details and viewer flags
        """
        self.issue_service = issue_service
        self.decorator = decorator

    async def execute(self, request: GetIssueRequest) -> GetIssueResponse:
        """Load and decorate an issue.

        Raises:
            NotFoundError: If the issue doesn't exist
        """
        issue = await self.issue_service.get_issue(IssueId(UUID(request.issue_id)))
        detail = await self.decorator.decorate_one(
            issue, UserId(UUID(request.user_id))
        )
        return GetIssueResponse(issue=detail)
