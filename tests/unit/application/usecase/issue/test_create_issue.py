"""Unit tests for CreateIssueUseCase."""

import pytest
from dishka import AsyncContainer

from civicsync.application.usecase.issue import CreateIssueRequest, CreateIssueUseCase
from civicsync.domain.error import ValidationError
from civicsync.domain.repository import UserRepository
from tests.factories import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateIssueUseCase:
    """Tests for CreateIssueUseCase."""

    @pytest.mark.asyncio
    async def test_response_is_decorated_for_creator(self, unit_env: AsyncContainer):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(CreateIssueUseCase)
        user = await user_repo.save(make_user(email="reporter@example.com", name="Reporter"))

        # Act
        response = await use_case.execute(
            CreateIssueRequest(
                user_id=str(user.id),
                title="Flooded underpass",
                description="Knee-deep water after rain",
                category="Water",
                location="Underpass on 3rd",
                latitude=12.5,
            )
        )

        # Assert
        assert response.message == "Issue created successfully"
        issue = response.issue
        assert issue.user_name == "Reporter"
        assert issue.user_email == "reporter@example.com"
        assert issue.is_owner is True
        assert issue.has_voted is False
        assert issue.latitude == 12.5
        assert issue.longitude is None

    @pytest.mark.asyncio
    async def test_serializes_camel_case(self, unit_env: AsyncContainer):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(CreateIssueUseCase)
        user = await user_repo.save(make_user())

        response = await use_case.execute(
            CreateIssueRequest(
                user_id=str(user.id),
                title="t",
                description="d",
                category="Other",
                location="l",
            )
        )
        data = response.model_dump(by_alias=True, mode="json")

        assert data["issue"]["voteCount"] == 0
        assert data["issue"]["status"] == "Pending"
        assert data["issue"]["userId"] == str(user.id)
        assert {"imageUrl", "createdAt", "updatedAt", "isOwner", "hasVoted"} <= set(
            data["issue"]
        )

    @pytest.mark.asyncio
    async def test_missing_title(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(CreateIssueUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateIssueRequest(
                    user_id="00000000-0000-4000-8000-000000000001",
                    description="d",
                    category="Other",
                    location="l",
                )
            )
