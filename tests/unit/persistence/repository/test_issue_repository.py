"""Unit tests for the in-memory issue repository query engine."""

from datetime import datetime, timedelta

import pytest

from civicsync.domain.value import IssueCategory, IssueSortOrder, IssueStatus
from civicsync.persistence.repository.inmemory import InMemoryIssueRepository
from tests.factories import make_issue


class TestFindAll:
    """Tests for filtering, search and sort."""

    @pytest.mark.asyncio
    async def test_filters_are_and_combined(self):
        """Category, status and search must all match."""
        # Arrange
        match = make_issue(
            title="Pothole on Elm",
            category=IssueCategory.ROAD,
            status=IssueStatus.PENDING,
        )
        wrong_status = make_issue(
            title="Pothole on Oak",
            category=IssueCategory.ROAD,
            status=IssueStatus.RESOLVED,
        )
        wrong_category = make_issue(
            title="Pothole in the water main",
            category=IssueCategory.WATER,
            status=IssueStatus.PENDING,
        )
        wrong_title = make_issue(
            title="Cracked pavement",
            category=IssueCategory.ROAD,
            status=IssueStatus.PENDING,
        )
        repo = InMemoryIssueRepository([match, wrong_status, wrong_category, wrong_title])

        # Act
        result = await repo.find_all(category="Road", status="Pending", search="POTHOLE")

        # Assert
        assert [i.id for i in result] == [match.id]

    @pytest.mark.asyncio
    async def test_unknown_category_matches_nothing(self):
        repo = InMemoryIssueRepository([make_issue(), make_issue()])

        result = await repo.find_all(category="Parks")

        assert result == []

    @pytest.mark.asyncio
    async def test_no_sort_keeps_insertion_order(self):
        first = make_issue(vote_count=1)
        second = make_issue(vote_count=9)
        third = make_issue(vote_count=5)
        repo = InMemoryIssueRepository([first, second, third])

        result = await repo.find_all()

        assert [i.id for i in result] == [first.id, second.id, third.id]

    @pytest.mark.asyncio
    async def test_newest_sorts_by_created_at_descending(self):
        now = datetime.now()
        old = make_issue(created_at=now - timedelta(days=3))
        new = make_issue(created_at=now)
        middle = make_issue(created_at=now - timedelta(days=1))
        repo = InMemoryIssueRepository([old, new, middle])

        result = await repo.find_all(sort=IssueSortOrder.NEWEST)

        assert [i.id for i in result] == [new.id, middle.id, old.id]

    @pytest.mark.asyncio
    async def test_most_voted_sort_is_stable_for_ties(self):
        """Issues with equal vote counts keep their relative order."""
        a = make_issue(vote_count=3)
        b = make_issue(vote_count=7)
        c = make_issue(vote_count=3)
        d = make_issue(vote_count=7)
        repo = InMemoryIssueRepository([a, b, c, d])

        result = await repo.find_all(sort=IssueSortOrder.MOST_VOTED)

        assert [i.id for i in result] == [b.id, d.id, a.id, c.id]


class TestMutations:
    """Tests for save, delete and the vote counter."""

    @pytest.mark.asyncio
    async def test_update_keeps_position(self):
        first = make_issue(title="First")
        second = make_issue(title="Second")
        repo = InMemoryIssueRepository([first, second])

        await repo.save(first.model_copy(update={"title": "First, edited"}))
        result = await repo.find_all()

        assert [i.title for i in result] == ["First, edited", "Second"]

    @pytest.mark.asyncio
    async def test_increment_vote_count(self):
        issue = make_issue(vote_count=4)
        repo = InMemoryIssueRepository([issue])

        updated = await repo.increment_vote_count(issue.id)

        assert updated is not None
        assert updated.vote_count == 5
        assert updated.updated_at >= issue.updated_at
        assert (await repo.find_by_id(issue.id)).vote_count == 5

    @pytest.mark.asyncio
    async def test_increment_missing_issue_returns_none(self):
        repo = InMemoryIssueRepository()

        assert await repo.increment_vote_count(make_issue().id) is None

    @pytest.mark.asyncio
    async def test_delete(self):
        issue = make_issue()
        repo = InMemoryIssueRepository([issue])

        assert await repo.delete(issue.id) is True
        assert await repo.delete(issue.id) is False
        assert await repo.count() == 0
