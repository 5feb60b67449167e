"""Update issue use case."""

from uuid import UUID

from pydantic import BaseModel

from civicsync.application.usecase.base import BaseUseCase, CamelModel
from civicsync.domain.service import IssueService
from civicsync.domain.value import ImageUpload, IssueId, UserId

from .common import IssueInfo


class UpdateIssueRequest(BaseModel):
    """Update issue request.

    Fields left as None are not changed. Coordinates are the submitted text;
    an empty string clears them.
    """

    issue_id: str
    user_id: str  # From the verified token
    title: str | None = None
    description: str | None = None
    category: str | None = None
    location: str | None = None
    latitude: str | None = None
    longitude: str | None = None
    image: ImageUpload | None = None


class UpdateIssueResponse(CamelModel):
    """Update issue response."""

    message: str = "Issue updated successfully"
    issue: IssueInfo


class UpdateIssueUseCase(BaseUseCase):
    """Use case for an owner editing their Pending issue."""

    def __init__(self, issue_service: IssueService) -> None:
        """Initialize update issue use case.

        Args:
            issue_service: Issue domain service
        """
        self.issue_service = issue_service

    async def execute(self, request: UpdateIssueRequest) -> UpdateIssueResponse:
        """Execute update issue flow.

        Raises:
            NotFoundError: If the issue doesn't exist
            NotAuthorizedError: If the user doesn't own the issue
            IssueLockedError: If the issue is no longer Pending
            ValidationError: If a coordinate isn't a number
            UploadError: If the new image is rejected
        """
        issue = await self.issue_service.update_issue(
            issue_id=IssueId(UUID(request.issue_id)),
            user_id=UserId(UUID(request.user_id)),
            title=request.title,
            description=request.description,
            category=request.category,
            location=request.location,
            latitude=request.latitude,
            longitude=request.longitude,
            image=request.image,
        )
        return UpdateIssueResponse(issue=IssueInfo.from_issue(issue))
