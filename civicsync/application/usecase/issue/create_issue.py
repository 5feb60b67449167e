"""Create issue use case."""

from uuid import UUID

from pydantic import BaseModel

from civicsync.application.usecase.base import BaseUseCase, CamelModel
from civicsync.domain.service import IssueService
from civicsync.domain.value import ImageUpload, UserId

from .common import IssueDecorator, IssueDetail


class CreateIssueRequest(BaseModel):
    """Create issue request."""

    user_id: str  # From the verified token
    title: str | None = None
    description: str | None = None
    category: str | None = None
    location: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    image: ImageUpload | None = None


class CreateIssueResponse(CamelModel):
    """Create issue response."""

    message: str = "Issue created successfully"
    issue: IssueDetail


class CreateIssueUseCase(BaseUseCase):
    """Use case for reporting a new issue."""

    def __init__(self, issue_service: IssueService, decorator: IssueDecorator) -> None:
        """Initialize create issue use case.

        Args:
            issue_service: Issue domain service
            decorator: Adds owner details and viewer flags
        """
        self.issue_service = issue_service
        self.decorator = decorator

    async def execute(self, request: CreateIssueRequest) -> CreateIssueResponse:
        """Execute create issue flow.

        Raises:
            ValidationError: If required fields are missing or the category is invalid
            UploadError: If the image is rejected
        """
        user_id = UserId(UUID(request.user_id))
        issue = await self.issue_service.create_issue(
            user_id=user_id,
            title=request.title,
            description=request.description,
            category=request.category,
            location=request.location,
            latitude=request.latitude,
            longitude=request.longitude,
            image=request.image,
        )
        return CreateIssueResponse(
            issue=await self.decorator.decorate_one(issue, user_id)
        )
