"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from civicsync.domain.model.vote import Vote
from civicsync.domain.value import IssueId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_issue(
        self, user_id: UserId, issue_id: IssueId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific issue.

        Args:
            user_id: The user's ID
            issue_id: The issue's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_issues(
        self, user_id: UserId, issue_ids: Sequence[IssueId]
    ) -> list[Vote]:
        """Find a user's votes on multiple issues (batch query).

        Args:
            user_id: The user's ID
            issue_ids: Issue IDs to check

        Returns:
            List of votes by the user on the specified issues
        """
        pass

    @abstractmethod
    async def find_by_issue(self, issue_id: IssueId) -> list[Vote]:
        """Find all votes on an issue.

        Args:
            issue_id: The issue's ID

        Returns:
            List of votes on the issue
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a vote if the user has not voted on the issue yet.

        The existence check and the insert happen as one step.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            DuplicateVoteError: If a vote already exists for this user/issue
        """
        pass

    @abstractmethod
    async def delete_by_issue(self, issue_id: IssueId) -> int:
        """Delete every vote referencing an issue.

        Args:
            issue_id: The issue's ID

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all votes."""
        pass
