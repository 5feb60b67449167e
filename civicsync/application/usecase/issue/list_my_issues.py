"""List my issues use case."""

from uuid import UUID

from pydantic import BaseModel

from civicsync.application.usecase.base import BaseUseCase, CamelModel
from civicsync.domain.service import IssueService
from civicsync.domain.value import UserId

from .common import IssueDecorator, IssueDetail


class ListMyIssuesRequest(BaseModel):
    """List my issues request."""

    user_id: str


class ListMyIssuesResponse(CamelModel):
    """The viewer's own issues."""

    issues: list[IssueDetail]
    total_count: int


class ListMyIssuesUseCase(BaseUseCase):
    """Use case for listing the issues a user reported, newest first."""

    def __init__(self, issue_service: IssueService, decorator: IssueDecorator) -> None:
        self.issue_service = issue_service
        self.decorator = decorator

    async def execute(self, request: ListMyIssuesRequest) -> ListMyIssuesResponse:
        user_id = UserId(UUID(request.user_id))
        issues = await self.issue_service.list_owned_issues(user_id)
        details = await self.decorator.decorate(issues, user_id)
        return ListMyIssuesResponse(issues=details, total_count=len(details))
