"""Analytics domain service.

Statistics are recomputed from the full collections on every call; nothing
is cached.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

import logfire

from civicsync.config import AnalyticsSettings
from civicsync.domain.model import Issue
from civicsync.domain.repository import IssueRepository, UserRepository, VoteRepository
from civicsync.domain.value import IssueCategory, IssueStatus, utc_now

from .base import Service


@dataclass
class DailyCount:
    """Number of issues created on one calendar day."""

    day: date
    count: int


@dataclass
class AnalyticsSnapshot:
    """Aggregate statistics over all issues, votes and users."""

    category_count: dict[IssueCategory, int]
    status_count: dict[IssueStatus, int]
    daily_submissions: list[DailyCount]
    most_voted_by_category: dict[IssueCategory, list[Issue]]
    recent_issues: list[Issue]
    total_issues: int
    total_votes: int
    total_users: int

    @property
    def average_votes_per_issue(self) -> float:
        """Votes per issue rounded to 2 places; 0 when there are no issues."""
        if self.total_issues == 0:
            return 0.0
        return round(self.total_votes / self.total_issues, 2)


class AnalyticsService(Service):
    """Domain service computing dashboard statistics."""

    def __init__(
        self,
        issue_repository: IssueRepository,
        vote_repository: VoteRepository,
        user_repository: UserRepository,
        analytics_settings: AnalyticsSettings,
    ) -> None:
        """Initialize analytics service.

        Args:
            issue_repository: Issue repository
            vote_repository: Vote repository
            user_repository: User repository
            analytics_settings: Window and top-N sizes
        """
        self.issue_repository = issue_repository
        self.vote_repository = vote_repository
        self.user_repository = user_repository
        self.settings = analytics_settings

    async def compute(self, now: datetime | None = None) -> AnalyticsSnapshot:
        """Compute statistics as of ``now`` (defaults to the current time).

        Daily submissions are bucketed by server-local calendar day. A naive
        ``now`` is read as local time.
        """
        today = (now or utc_now()).astimezone().date()

        with logfire.span("analytics_service.compute"):
            issues = await self.issue_repository.find_all()

            snapshot = AnalyticsSnapshot(
                category_count=self._count_by(issues, IssueCategory, "category"),
                status_count=self._count_by(issues, IssueStatus, "status"),
                daily_submissions=self._daily_submissions(issues, today),
                most_voted_by_category=self._most_voted_by_category(issues),
                recent_issues=self._most_recent(issues),
                total_issues=len(issues),
                total_votes=await self.vote_repository.count(),
                total_users=await self.user_repository.count(),
            )

            logfire.info(
                "Analytics computed",
                total_issues=snapshot.total_issues,
                total_votes=snapshot.total_votes,
                total_users=snapshot.total_users,
            )
            return snapshot

    @staticmethod
    def _count_by(issues: list[Issue], members, attribute: str) -> dict:
        """Count issues per enum member, zero-filled."""
        counts = {member: 0 for member in members}
        for issue in issues:
            counts[getattr(issue, attribute)] += 1
        return counts

    def _daily_submissions(self, issues: list[Issue], today: date) -> list[DailyCount]:
        """One entry per calendar day, oldest first, ending today."""
        window = self.settings.daily_window_days
        days = [today - timedelta(days=offset) for offset in range(window - 1, -1, -1)]

        per_day = {day: 0 for day in days}
        for issue in issues:
            created = issue.created_at.astimezone().date()
            if created in per_day:
                per_day[created] += 1

        return [DailyCount(day=day, count=per_day[day]) for day in days]

    def _most_voted_by_category(
        self, issues: list[Issue]
    ) -> dict[IssueCategory, list[Issue]]:
        limit = self.settings.top_issues_per_category
        result = {}
        for category in IssueCategory:
            in_category = [i for i in issues if i.category == category]
            in_category.sort(key=lambda i: i.vote_count, reverse=True)
            result[category] = in_category[:limit]
        return result

    def _most_recent(self, issues: list[Issue]) -> list[Issue]:
        ordered = sorted(issues, key=lambda i: i.created_at, reverse=True)
        return ordered[: self.settings.recent_issues]

