"""Update issue status use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from civicsync.application.usecase.base import BaseUseCase, CamelModel
from civicsync.domain.service import IssueService
from civicsync.domain.value import IssueId

from .common import IssueInfo


class UpdateStatusRequest(BaseModel):
    """Update status request."""

    issue_id: str
    user_id: str  # Actor, for the audit log only
    status: str | None = None


class UpdateStatusResponse(CamelModel):
    """Update status response."""

    message: str = "Status updated successfully"
    issue: IssueInfo


class UpdateStatusUseCase(BaseUseCase):
    """Use case for moving an issue between statuses.

    Any authenticated user may change any issue's status.
    """

    def __init__(self, issue_service: IssueService) -> None:
        self.issue_service = issue_service

    async def execute(self, request: UpdateStatusRequest) -> UpdateStatusResponse:
        """Execute status change.

        Raises:
            ValidationError: If the status is not Pending, In Progress or Resolved
            NotFoundError: If the issue doesn't exist
        """
        issue = await self.issue_service.change_status(
            IssueId(UUID(request.issue_id)), request.status
        )
        logfire.info(
            "Status changed by user",
            issue_id=request.issue_id,
            actor_id=request.user_id,
            status=issue.status.value,
        )
        return UpdateStatusResponse(issue=IssueInfo.from_issue(issue))
