"""End-to-end tests for the analytics API."""

import pytest
from fastapi.testclient import TestClient

from civicsync.interface.api.app import create_app
from civicsync.persistence.seed import SAMPLE_PASSWORD
from tests.di import build_test_container


def _login(client, email="john@example.com") -> dict:
    response = client.post(
        "/api/auth/login", json={"email": email, "password": SAMPLE_PASSWORD}
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


class TestAnalyticsEmpty:
    @pytest.fixture
    def client(self):
        return TestClient(create_app(build_test_container()))

    def test_no_issues(self, client):
        response = client.post(
            "/api/auth/register",
            json={"email": "solo@example.com", "password": "secret1", "name": "Solo"},
        )
        headers = {"Authorization": f"Bearer {response.json()['token']}"}

        response = client.get("/api/analytics", headers=headers)

        assert response.status_code == 200
        data = response.json()
        assert data["totalIssues"] == 0
        assert data["totalUsers"] == 1
        assert data["averageVotesPerIssue"] == 0
        assert len(data["dailySubmissions"]) == 7
        assert data["categoryCount"] == {
            "Road": 0,
            "Water": 0,
            "Sanitation": 0,
            "Electricity": 0,
            "Other": 0,
        }


class TestAnalyticsSeeded:
    """Against the seeded sample data set."""

    @pytest.fixture
    def client(self):
        return TestClient(create_app(build_test_container(unmock={"persistence"})))

    def test_sample_data_totals(self, client):
        response = client.get("/api/analytics", headers=_login(client))

        assert response.status_code == 200
        data = response.json()
        assert data["totalIssues"] == 4
        assert data["totalVotes"] == 4
        assert data["totalUsers"] == 2
        assert data["averageVotesPerIssue"] == "1.00"
        assert data["statusCount"] == {"Pending": 2, "In Progress": 1, "Resolved": 1}
        # The garbage issue is created at startup, so today has one submission
        assert data["dailySubmissions"][-1]["count"] == 1
        assert data["recentIssues"][0]["title"] == "Garbage not collected for a week"
        assert data["mostVotedByCategory"]["Water"][0]["voteCount"] == 25

    def test_sample_votes_show_as_voted(self, client):
        response = client.get(
            "/api/issues", params={"sortBy": "most-voted"}, headers=_login(client)
        )

        issues = response.json()["issues"]
        assert [i["voteCount"] for i in issues] == [25, 20, 15, 8]
        by_title = {i["title"]: i for i in issues}
        assert by_title["Street light not working"]["hasVoted"] is True
        assert by_title["Huge pothole on Main Street"]["isOwner"] is True
        assert by_title["Huge pothole on Main Street"]["hasVoted"] is False
