"""List issues use case."""

import math
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from civicsync.application.usecase.base import BaseUseCase, CamelModel
from civicsync.config import PaginationSettings
from civicsync.domain.service import IssueService
from civicsync.domain.value import IssueSortOrder, UserId

from .common import IssueDecorator, IssueDetail


class ListIssuesRequest(BaseModel):
    """List issues request."""

    user_id: str  # Viewer, from the verified token
    page: int | None = Field(default=None, ge=1)  # None means the configured default
    limit: int | None = Field(default=None, ge=1)
    category: str | None = None  # Category name or "all"
    status: str | None = None  # Status name or "all"
    search: str | None = None  # Case-insensitive title substring
    sort_by: str | None = IssueSortOrder.NEWEST.value


class ListIssuesResponse(CamelModel):
    """One page of the issue feed."""

    issues: list[IssueDetail]
    total_count: int
    current_page: int
    total_pages: int
    has_more: bool


class ListIssuesUseCase(BaseUseCase):
    """Use case for browsing the issue feed with filters and pagination."""

    def __init__(
        self,
        issue_service: IssueService,
        decorator: IssueDecorator,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list issues use case.

        Args:
            issue_service: Issue domain service
            decorator: Adds owner details and viewer flags
            pagination_settings: Default page and page size
        """
        self.issue_service = issue_service
        self.decorator = decorator
        self.pagination = pagination_settings

    async def execute(self, request: ListIssuesRequest) -> ListIssuesResponse:
        """Execute list issues flow.

        Steps:
        1. Filter, search and sort the whole collection (via IssueService)
        2. Slice out the requested page
        3. Decorate the page for the viewer

        Args:
            request: Filters, sort and page

        Returns:
            The page plus pagination metadata computed before slicing
        """
        page_number = request.page or self.pagination.default_page
        limit = request.limit or self.pagination.default_limit

        with logfire.span(
            "list_issues.execute",
            page=page_number,
            limit=limit,
            category=request.category,
            status=request.status,
            search=request.search,
            sort_by=request.sort_by,
        ):
            matching = await self.issue_service.query_issues(
                category=request.category,
                status=request.status,
                search=request.search,
                sort_by=request.sort_by,
            )

            total_count = len(matching)
            start = (page_number - 1) * limit
            end = start + limit

            page = await self.decorator.decorate(
                matching[start:end], UserId(UUID(request.user_id))
            )

            logfire.info("Issues listed", count=len(page), total=total_count)

            return ListIssuesResponse(
                issues=page,
                total_count=total_count,
                current_page=page_number,
                total_pages=math.ceil(total_count / limit),
                has_more=end < total_count,
            )
