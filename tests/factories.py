"""Builders for domain objects used across tests."""

from datetime import datetime
from uuid import uuid4

from civicsync.domain.model import Issue, User
from civicsync.domain.value import IssueCategory, IssueId, IssueStatus, UserId


def make_user(
    email: str = "citizen@example.com", name: str = "Citizen", **overrides
) -> User:
    """Build a user with a placeholder password hash."""
    fields = {
        "id": UserId(uuid4()),
        "email": email,
        "name": name,
        "password_hash": "not-a-real-hash",
        "created_at": datetime.now(),
    }
    fields.update(overrides)
    return User(**fields)


def make_issue(
    user_id: UserId | None = None,
    title: str = "Broken bench in park",
    category: IssueCategory = IssueCategory.OTHER,
    status: IssueStatus = IssueStatus.PENDING,
    vote_count: int = 0,
    created_at: datetime | None = None,
    **overrides,
) -> Issue:
    """Build an issue with sensible defaults."""
    created_at = created_at or datetime.now()
    fields = {
        "id": IssueId(uuid4()),
        "user_id": user_id or UserId(uuid4()),
        "title": title,
        "description": "Needs fixing",
        "category": category,
        "location": "Central Park",
        "status": status,
        "vote_count": vote_count,
        "created_at": created_at,
        "updated_at": created_at,
    }
    fields.update(overrides)
    return Issue(**fields)
