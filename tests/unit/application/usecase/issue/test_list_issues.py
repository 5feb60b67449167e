"""Unit tests for ListIssuesUseCase."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from dishka import AsyncContainer

from civicsync.application.usecase.issue import ListIssuesRequest, ListIssuesUseCase
from civicsync.domain.repository import IssueRepository, UserRepository
from civicsync.domain.service import VoteService
from civicsync.domain.value import IssueCategory, UserId
from tests.factories import make_issue, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _seed(repo: IssueRepository, count: int, **overrides) -> list:
    start = datetime(2024, 1, 1)
    return [
        await repo.save(make_issue(created_at=start + timedelta(hours=n), **overrides))
        for n in range(count)
    ]


class TestPagination:
    """Tests for page slicing and metadata."""

    @pytest.mark.asyncio
    async def test_second_page_of_fifteen(self, unit_env: AsyncContainer):
        # Arrange
        repo = await unit_env.get(IssueRepository)
        use_case = await unit_env.get(ListIssuesUseCase)
        await _seed(repo, 15)

        # Act
        response = await use_case.execute(
            ListIssuesRequest(user_id=str(uuid4()), page=2, limit=10)
        )

        # Assert
        assert len(response.issues) == 5
        assert response.total_count == 15
        assert response.total_pages == 2
        assert response.current_page == 2
        assert response.has_more is False

    @pytest.mark.asyncio
    async def test_first_page_has_more(self, unit_env: AsyncContainer):
        repo = await unit_env.get(IssueRepository)
        use_case = await unit_env.get(ListIssuesUseCase)
        issues = await _seed(repo, 15)

        response = await use_case.execute(ListIssuesRequest(user_id=str(uuid4())))

        assert response.has_more is True
        # Default sort is newest first
        assert response.issues[0].id == str(issues[-1].id)

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, unit_env: AsyncContainer):
        repo = await unit_env.get(IssueRepository)
        use_case = await unit_env.get(ListIssuesUseCase)
        await _seed(repo, 3)

        response = await use_case.execute(
            ListIssuesRequest(user_id=str(uuid4()), page=5, limit=2)
        )

        assert response.issues == []
        assert response.total_count == 3
        assert response.total_pages == 2
        assert response.has_more is False

    @pytest.mark.asyncio
    async def test_empty_collection(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(ListIssuesUseCase)

        response = await use_case.execute(ListIssuesRequest(user_id=str(uuid4())))

        assert response.total_count == 0
        assert response.total_pages == 0
        assert response.has_more is False

    def test_page_must_be_positive(self):
        with pytest.raises(ValueError):
            ListIssuesRequest(user_id=str(uuid4()), page=0)


class TestDecoration:
    """Tests for viewer-specific fields."""

    @pytest.mark.asyncio
    async def test_owner_and_vote_flags(self, unit_env: AsyncContainer):
        # Arrange
        issue_repo = await unit_env.get(IssueRepository)
        user_repo = await unit_env.get(UserRepository)
        vote_service = await unit_env.get(VoteService)
        use_case = await unit_env.get(ListIssuesUseCase)

        viewer = await user_repo.save(make_user(email="viewer@example.com", name="Viewer"))
        mine = await issue_repo.save(make_issue(user_id=viewer.id, title="Mine"))
        orphan = await issue_repo.save(make_issue(user_id=UserId(uuid4()), title="Orphan"))
        await vote_service.cast_vote(orphan.id, viewer.id)

        # Act
        response = await use_case.execute(
            ListIssuesRequest(user_id=str(viewer.id), sort_by="unknown")
        )

        # Assert - unknown sort keeps collection order
        by_title = {i.title: i for i in response.issues}
        assert [i.title for i in response.issues] == ["Mine", "Orphan"]
        assert by_title["Mine"].is_owner is True
        assert by_title["Mine"].has_voted is False
        assert by_title["Mine"].user_name == "Viewer"
        assert by_title["Orphan"].is_owner is False
        assert by_title["Orphan"].has_voted is True
        assert by_title["Orphan"].user_name == "Unknown User"
        assert by_title["Orphan"].user_email == "unknown@example.com"

    @pytest.mark.asyncio
    async def test_filters_apply_before_pagination(self, unit_env: AsyncContainer):
        repo = await unit_env.get(IssueRepository)
        use_case = await unit_env.get(ListIssuesUseCase)
        await _seed(repo, 4, category=IssueCategory.ROAD)
        await _seed(repo, 3, category=IssueCategory.WATER)

        response = await use_case.execute(
            ListIssuesRequest(user_id=str(uuid4()), category="Water", limit=2)
        )

        assert response.total_count == 3
        assert response.total_pages == 2
        assert {i.category for i in response.issues} == {IssueCategory.WATER}
