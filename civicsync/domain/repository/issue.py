"""Issue repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from civicsync.domain.model.issue import Issue
from civicsync.domain.value import IssueId, IssueSortOrder, UserId


class IssueRepository(ABC):
    """Repository for Issue aggregate.

    Defines the contract for issue persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, issue_id: IssueId) -> Optional[Issue]:
        """Find an issue by ID.

        Args:
            issue_id: The issue's unique identifier

        Returns:
            The issue if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        category: Optional[str] = None,
        status: Optional[str] = None,
        search: Optional[str] = None,
        sort: Optional[IssueSortOrder] = None,
    ) -> list[Issue]:
        """Find every issue matching the filters, sorted.

        Filters are combined with AND. Category and status are exact
        matches, search is a case-insensitive substring of the title.
        Sorting is stable; with no sort order the collection order is kept.

        Args:
            category: Category to match (None for all)
            status: Status to match (None for all)
            search: Title substring to match (None for all)
            sort: Sort order (None to keep insertion order)

        Returns:
            A new list of matching issues; never a live view of the store
        """
        pass

    @abstractmethod
    async def find_by_owner(self, user_id: UserId) -> list[Issue]:
        """Find all issues owned by a user, newest first.

        Args:
            user_id: The owner's user ID

        Returns:
            List of issues owned by the user
        """
        pass

    @abstractmethod
    async def save(self, issue: Issue) -> Issue:
        """Save an issue (create or update).

        Args:
            issue: The issue to save

        Returns:
            The saved issue
        """
        pass

    @abstractmethod
    async def delete(self, issue_id: IssueId) -> bool:
        """Delete an issue (hard delete).

        Args:
            issue_id: The issue ID to delete

        Returns:
            True if an issue was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def increment_vote_count(self, issue_id: IssueId) -> Optional[Issue]:
        """Atomically increment the vote counter by 1 and refresh updated_at.

        Args:
            issue_id: The issue ID

        Returns:
            The updated issue, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all issues."""
        pass
