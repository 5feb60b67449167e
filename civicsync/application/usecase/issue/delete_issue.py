"""Delete issue use case."""

from uuid import UUID

from pydantic import BaseModel

from civicsync.application.usecase.base import BaseUseCase, CamelModel
from civicsync.domain.service import IssueService
from civicsync.domain.value import IssueId, UserId


class DeleteIssueRequest(BaseModel):
    """Delete issue request."""

    issue_id: str
    user_id: str  # From the verified token


class DeleteIssueResponse(CamelModel):
    """Delete issue response."""

    message: str = "Issue deleted successfully"


class DeleteIssueUseCase(BaseUseCase):
    """Use case for an owner deleting their Pending issue."""

    def __init__(self, issue_service: IssueService) -> None:
        self.issue_service = issue_service

    async def execute(self, request: DeleteIssueRequest) -> DeleteIssueResponse:
        """Delete the issue along with its votes and image.

        Raises:
            NotFoundError: If the issue doesn't exist
            NotAuthorizedError: If the user doesn't own the issue
            IssueLockedError: If the issue is no longer Pending
        """
        await self.issue_service.delete_issue(
            IssueId(UUID(request.issue_id)), UserId(UUID(request.user_id))
        )
        return DeleteIssueResponse()
