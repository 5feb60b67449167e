"""In-memory vote repository."""

from typing import Iterable, Optional, Sequence

from civicsync.domain.error import DuplicateVoteError
from civicsync.domain.model.vote import Vote
from civicsync.domain.repository.vote import VoteRepository
from civicsync.domain.value import IssueId, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository."""

    def __init__(self, votes: Iterable[Vote] = ()) -> None:
        self._votes: list[Vote] = list(votes)

    async def find_by_user_and_issue(
        self, user_id: UserId, issue_id: IssueId
    ) -> Optional[Vote]:
        """Find a vote by user and issue."""
        for vote in self._votes:
            if vote.user_id == user_id and vote.issue_id == issue_id:
                return vote
        return None

    async def find_by_user_and_issues(
        self, user_id: UserId, issue_ids: Sequence[IssueId]
    ) -> list[Vote]:
        """Find a user's votes on multiple issues (batch query)."""
        if not issue_ids:
            return []

        wanted = set(issue_ids)
        return [v for v in self._votes if v.user_id == user_id and v.issue_id in wanted]

    async def find_by_issue(self, issue_id: IssueId) -> list[Vote]:
        """Find all votes on an issue."""
        return [v for v in self._votes if v.issue_id == issue_id]

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote unless the user already voted on the issue.

        No await between the check and the append, so this is atomic on
        the event loop.

        Raises:
            DuplicateVoteError: If vote already exists
        """
        for existing in self._votes:
            if existing.user_id == vote.user_id and existing.issue_id == vote.issue_id:
                raise DuplicateVoteError(str(vote.user_id), str(vote.issue_id))

        self._votes.append(vote)
        return vote

    async def delete_by_issue(self, issue_id: IssueId) -> int:
        """Delete every vote on an issue."""
        before = len(self._votes)
        self._votes = [v for v in self._votes if v.issue_id != issue_id]
        return before - len(self._votes)

    async def count(self) -> int:
        """Count all votes."""
        return len(self._votes)
