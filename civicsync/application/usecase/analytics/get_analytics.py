"""Get analytics use case."""

from datetime import date, datetime

from pydantic import BaseModel

from civicsync.application.usecase.base import BaseUseCase, CamelModel
from civicsync.domain.service import AnalyticsService
from civicsync.domain.value import IssueCategory, IssueStatus


class GetAnalyticsRequest(BaseModel):
    """Get analytics request."""

    # Reference time for the daily histogram; None means now
    now: datetime | None = None


class DailySubmission(CamelModel):
    date: date
    count: int


class TopIssue(CamelModel):
    id: str
    title: str
    vote_count: int
    status: IssueStatus


class RecentIssue(CamelModel):
    id: str
    title: str
    category: IssueCategory
    created_at: datetime


class GetAnalyticsResponse(CamelModel):
    """Dashboard statistics.

    Category and status maps are keyed by display name and list every member.
    """

    category_count: dict[str, int]
    status_count: dict[str, int]
    daily_submissions: list[DailySubmission]
    most_voted_by_category: dict[str, list[TopIssue]]
    recent_issues: list[RecentIssue]
    total_issues: int
    total_votes: int
    total_users: int
    # Two-decimal string, or the integer 0 when there are no issues
    average_votes_per_issue: str | int


class GetAnalyticsUseCase(BaseUseCase):
    """Use case for the analytics dashboard."""

    def __init__(self, analytics_service: AnalyticsService) -> None:
        """Initialize get analytics use case.

        Args:
            analytics_service: Analytics domain service
        """
        self.analytics_service = analytics_service

    async def execute(self, request: GetAnalyticsRequest) -> GetAnalyticsResponse:
        snapshot = await self.analytics_service.compute(now=request.now)

        average: str | int = 0
        if snapshot.total_issues:
            average = f"{snapshot.average_votes_per_issue:.2f}"

        return GetAnalyticsResponse(
            category_count={c.value: n for c, n in snapshot.category_count.items()},
            status_count={s.value: n for s, n in snapshot.status_count.items()},
            daily_submissions=[
                DailySubmission(date=d.day, count=d.count)
                for d in snapshot.daily_submissions
            ],
            most_voted_by_category={
                category.value: [
                    TopIssue(
                        id=str(issue.id),
                        title=issue.title,
                        vote_count=issue.vote_count,
                        status=issue.status,
                    )
                    for issue in issues
                ]
                for category, issues in snapshot.most_voted_by_category.items()
            },
            recent_issues=[
                RecentIssue(
                    id=str(issue.id),
                    title=issue.title,
                    category=issue.category,
                    created_at=issue.created_at,
                )
                for issue in snapshot.recent_issues
            ],
            total_issues=snapshot.total_issues,
            total_votes=snapshot.total_votes,
            total_users=snapshot.total_users,
            average_votes_per_issue=average,
        )
