"""In-memory issue repository."""

from typing import Iterable, Optional

from civicsync.domain.model.issue import Issue
from civicsync.domain.repository.issue import IssueRepository
from civicsync.domain.value import IssueId, IssueSortOrder, UserId, utc_now


class InMemoryIssueRepository(IssueRepository):
    """In-memory implementation of IssueRepository.

    Issues are kept in insertion order; updates keep an issue's position.
    """

    def __init__(self, issues: Iterable[Issue] = ()) -> None:
        self._issues: dict[IssueId, Issue] = {issue.id: issue for issue in issues}

    async def find_by_id(self, issue_id: IssueId) -> Optional[Issue]:
        """Find an issue by ID."""
        return self._issues.get(issue_id)

    async def find_all(
        self,
        category: Optional[str] = None,
        status: Optional[str] = None,
        search: Optional[str] = None,
        sort: Optional[IssueSortOrder] = None,
    ) -> list[Issue]:
        """Find issues matching the filters, sorted."""
        # Snapshot so concurrent saves/deletes can't affect this scan
        issues = list(self._issues.values())

        if category is not None:
            issues = [i for i in issues if i.category == category]

        if status is not None:
            issues = [i for i in issues if i.status == status]

        if search:
            needle = search.lower()
            issues = [i for i in issues if needle in i.title.lower()]

        # list.sort is stable, including with reverse=True
        if sort == IssueSortOrder.NEWEST:
            issues.sort(key=lambda i: i.created_at, reverse=True)
        elif sort == IssueSortOrder.MOST_VOTED:
            issues.sort(key=lambda i: i.vote_count, reverse=True)

        return issues

    async def find_by_owner(self, user_id: UserId) -> list[Issue]:
        """Find issues owned by a user, newest first."""
        issues = [i for i in self._issues.values() if i.user_id == user_id]
        issues.sort(key=lambda i: i.created_at, reverse=True)
        return issues

    async def save(self, issue: Issue) -> Issue:
        """Save or update an issue."""
        self._issues[issue.id] = issue
        return issue

    async def delete(self, issue_id: IssueId) -> bool:
        """Delete an issue."""
        return self._issues.pop(issue_id, None) is not None

    async def increment_vote_count(self, issue_id: IssueId) -> Optional[Issue]:
        """Increment the vote counter by 1."""
        issue = self._issues.get(issue_id)
        if issue is None:
            return None

        updated = issue.model_copy(
            update={"vote_count": issue.vote_count + 1, "updated_at": utc_now()}
        )
        self._issues[issue_id] = updated
        return updated

    async def count(self) -> int:
        """Count all issues."""
        return len(self._issues)
