"""Vote domain service."""

from typing import Sequence
from uuid import uuid4

import logfire

from civicsync.domain.error import DuplicateVoteError, NotFoundError
from civicsync.domain.model import Issue, Vote
from civicsync.domain.repository import IssueRepository, VoteRepository
from civicsync.domain.value import IssueId, UserId, VoteId, utc_now

from .base import Service


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self, vote_repository: VoteRepository, issue_repository: IssueRepository
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            issue_repository: Issue repository
        """
        self.vote_repository = vote_repository
        self.issue_repository = issue_repository

    async def cast_vote(self, issue_id: IssueId, user_id: UserId) -> Issue:
        """Vote on an issue.

        Creates the vote record and increments the issue's vote counter.

        Args:
            issue_id: Issue ID
            user_id: Voter's user ID

        Returns:
            The issue with its updated vote count

        Raises:
            NotFoundError: If the issue doesn't exist
            DuplicateVoteError: If the user already voted on this issue
        """
        with logfire.span("cast_vote", issue_id=str(issue_id), user_id=str(user_id)):
            issue = await self.issue_repository.find_by_id(issue_id)
            if issue is None:
                logfire.warn("Vote on non-existent issue", issue_id=str(issue_id))
                raise NotFoundError("Issue", str(issue_id))

            vote = Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                issue_id=issue_id,
                created_at=utc_now(),
            )

            try:
                await self.vote_repository.save(vote)
            except DuplicateVoteError:
                logfire.warn(
                    "Duplicate vote attempt",
                    user_id=str(user_id),
                    issue_id=str(issue_id),
                )
                raise

            updated = await self.issue_repository.increment_vote_count(issue_id)
            if updated is None:
                # Issue was deleted between the lookup and the increment
                await self.vote_repository.delete_by_issue(issue_id)
                raise NotFoundError("Issue", str(issue_id))

            logfire.info(
                "Vote recorded", issue_id=str(issue_id), vote_count=updated.vote_count
            )
            return updated

    async def get_voted_issue_ids(
        self, user_id: UserId, issue_ids: Sequence[IssueId]
    ) -> set[IssueId]:
        """Which of the given issues the user has voted on.

        Args:
            user_id: User ID
            issue_ids: Issue IDs to check

        Returns:
            Set of issue IDs the user voted on
        """
        if not issue_ids:
            return set()

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_user_and_issues(user_id, issue_ids)
        return {vote.issue_id for vote in votes}
