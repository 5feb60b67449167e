"""Shared issue response models and viewer decoration."""

from datetime import datetime
from typing import Sequence

from civicsync.application.usecase.base import CamelModel
from civicsync.domain.model import Issue
from civicsync.domain.service import UserService, VoteService
from civicsync.domain.value import IssueCategory, IssueStatus, UserId

UNKNOWN_USER_NAME = "Unknown User"
UNKNOWN_USER_EMAIL = "unknown@example.com"


def _issue_fields(issue: Issue) -> dict:
    return {
        "id": str(issue.id),
        "user_id": str(issue.user_id),
        "title": issue.title,
        "description": issue.description,
        "category": issue.category,
        "location": issue.location,
        "latitude": issue.latitude,
        "longitude": issue.longitude,
        "status": issue.status,
        "image_url": issue.image_url,
        "vote_count": issue.vote_count,
        "created_at": issue.created_at,
        "updated_at": issue.updated_at,
    }


class IssueInfo(CamelModel):
    """Issue as stored."""

    id: str
    user_id: str
    title: str
    description: str
    category: IssueCategory
    location: str
    latitude: float | None
    longitude: float | None
    status: IssueStatus
    image_url: str | None
    vote_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_issue(cls, issue: Issue) -> "IssueInfo":
        return cls(**_issue_fields(issue))


class IssueDetail(IssueInfo):
    """Issue decorated for a particular viewer."""

    user_name: str
    user_email: str
    has_voted: bool
    is_owner: bool


class IssueDecorator:
    """Adds owner details and viewer flags to issues.

    Owners and votes are loaded in one batch per call.
    """

    def __init__(self, user_service: UserService, vote_service: VoteService) -> None:
        self.user_service = user_service
        self.vote_service = vote_service

    async def decorate(
        self, issues: Sequence[Issue], viewer_id: UserId
    ) -> list[IssueDetail]:
        if not issues:
            return []

        owners = await self.user_service.get_users_by_ids(
            list({issue.user_id for issue in issues})
        )
        voted = await self.vote_service.get_voted_issue_ids(
            viewer_id, [issue.id for issue in issues]
        )

        details = []
        for issue in issues:
            # Owner may be missing for orphaned issues
            owner = owners.get(issue.user_id)
            details.append(
                IssueDetail(
                    **_issue_fields(issue),
                    user_name=owner.name if owner else UNKNOWN_USER_NAME,
                    user_email=owner.email if owner else UNKNOWN_USER_EMAIL,
                    has_voted=issue.id in voted,
                    is_owner=issue.is_owned_by(viewer_id),
                )
            )
        return details

    async def decorate_one(self, issue: Issue, viewer_id: UserId) -> IssueDetail:
        (detail,) = await self.decorate([issue], viewer_id)
        return detail
