"""Issue domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from civicsync.domain.error import (
    IssueLockedError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from civicsync.domain.model import Issue
from civicsync.domain.repository import IssueRepository, VoteRepository
from civicsync.domain.value import (
    FILTER_ALL,
    ImageUpload,
    IssueCategory,
    IssueId,
    IssueSortOrder,
    IssueStatus,
    UserId,
    utc_now,
)

from .base import Service
from .image_service import ImageService


def _clean(value: Optional[str]) -> Optional[str]:
    """Trim a text field; blank counts as not provided."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_coordinate(name: str, raw: str) -> Optional[float]:
    """Parse a submitted coordinate; blank clears it."""
    raw = raw.strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValidationError(f"Invalid {name}: must be a number")


class IssueService(Service):
    """Domain service for issue queries and mutations.

    Owners may update or delete their issues only while they are Pending.
    Status changes are open to any authenticated user.
    """

    def __init__(
        self,
        issue_repository: IssueRepository,
        vote_repository: VoteRepository,
        image_service: ImageService,
    ) -> None:
        """Initialize issue service.

        Args:
            issue_repository: Issue repository
            vote_repository: Vote repository (for delete cascade)
            image_service: Image service (for uploads and cleanup)
        """
        self.issue_repository = issue_repository
        self.vote_repository = vote_repository
        self.image_service = image_service

    async def create_issue(
        self,
        user_id: UserId,
        title: Optional[str],
        description: Optional[str],
        category: Optional[str],
        location: Optional[str],
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        image: Optional[ImageUpload] = None,
    ) -> Issue:
        """Create a new Pending issue with no votes.

        Raises:
            ValidationError: If a required field is missing or the category is invalid
            UploadError: If the image is rejected
        """
        title = _clean(title)
        description = _clean(description)
        location = _clean(location)

        with logfire.span(
            "issue_service.create_issue", user_id=str(user_id), category=category
        ):
            if not (title and description and category and location):
                raise ValidationError(
                    "Title, description, category, and location are required"
                )

            parsed_category = IssueCategory.parse(category)
            if parsed_category is None:
                raise ValidationError("Invalid category")

            image_url = await self.image_service.store(image) if image else None

            now = utc_now()
            issue = Issue(
                id=IssueId(uuid4()),
                user_id=user_id,
                title=title,
                description=description,
                category=parsed_category,
                location=location,
                latitude=latitude,
                longitude=longitude,
                status=IssueStatus.PENDING,
                image_url=image_url,
                vote_count=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.issue_repository.save(issue)

            logfire.info(
                "Issue created",
                issue_id=str(saved.id),
                category=saved.category.value,
                has_image=image_url is not None,
            )
            return saved

    async def get_issue(self, issue_id: IssueId) -> Issue:
        """Get an issue by ID.

        Raises:
            NotFoundError: If the issue doesn't exist
        """
        issue = await self.issue_repository.find_by_id(issue_id)
        if issue is None:
            logfire.warn("Issue not found", issue_id=str(issue_id))
            raise NotFoundError("Issue", str(issue_id))
        return issue

    async def query_issues(
        self,
        category: Optional[str] = None,
        status: Optional[str] = None,
        search: Optional[str] = None,
        sort_by: Optional[str] = None,
    ) -> list[Issue]:
        """Filter, search and sort the whole issue collection.

        Empty values and the "all" sentinel disable a filter. Category and
        status values outside their sets are not errors; they match nothing.
        An unrecognized sort keeps collection order.

        Returns:
            Every matching issue, sorted; pagination is the caller's concern
        """
        with logfire.span(
            "issue_service.query_issues",
            category=category,
            status=status,
            search=search,
            sort_by=sort_by,
        ):
            issues = await self.issue_repository.find_all(
                category=category if category and category != FILTER_ALL else None,
                status=status if status and status != FILTER_ALL else None,
                search=search or None,
                sort=IssueSortOrder.parse(sort_by),
            )
            logfire.info("Issues queried", matched=len(issues))
            return issues

    async def list_owned_issues(self, user_id: UserId) -> list[Issue]:
        """All issues owned by a user, newest first."""
        return await self.issue_repository.find_by_owner(user_id)

    async def update_issue(
        self,
        issue_id: IssueId,
        user_id: UserId,
        title: Optional[str] = None,
        description: Optional[str] = None,
        category: Optional[str] = None,
        location: Optional[str] = None,
        latitude: Optional[str] = None,
        longitude: Optional[str] = None,
        image: Optional[ImageUpload] = None,
    ) -> Issue:
        """Apply a partial update.

        Only provided fields change. A category outside the closed set is
        ignored. Coordinates arrive as submitted text: None leaves them
        alone, blank clears them. A new image replaces and removes the old
        one.

        Raises:
            NotFoundError: If the issue doesn't exist
            NotAuthorizedError: If the user doesn't own the issue
            IssueLockedError: If the issue is no longer Pending
            ValidationError: If a coordinate isn't a number
            UploadError: If the new image is rejected
        """
        with logfire.span(
            "issue_service.update_issue", issue_id=str(issue_id), user_id=str(user_id)
        ):
            issue = await self._get_mutable_issue(issue_id, user_id, action="edit")

            title = _clean(title)
            description = _clean(description)
            location = _clean(location)

            changes: dict = {}
            if title:
                changes["title"] = title
            if description:
                changes["description"] = description
            if category:
                parsed_category = IssueCategory.parse(category)
                if parsed_category is not None:
                    changes["category"] = parsed_category
                else:
                    logfire.info("Ignoring invalid category", category=category)
            if location:
                changes["location"] = location
            if latitude is not None:
                changes["latitude"] = _parse_coordinate("latitude", latitude)
            if longitude is not None:
                changes["longitude"] = _parse_coordinate("longitude", longitude)

            if image is not None:
                new_url = await self.image_service.store(image)
                await self.image_service.remove(issue.image_url)
                changes["image_url"] = new_url

            changes["updated_at"] = utc_now()
            updated = await self.issue_repository.save(issue.model_copy(update=changes))

            logfire.info(
                "Issue updated",
                issue_id=str(issue_id),
                fields=sorted(k for k in changes if k != "updated_at"),
            )
            return updated

    async def delete_issue(self, issue_id: IssueId, user_id: UserId) -> None:
        """Delete an issue with its votes and image.

        Raises:
            NotFoundError: If the issue doesn't exist
            NotAuthorizedError: If the user doesn't own the issue
            IssueLockedError: If the issue is no longer Pending
        """
        with logfire.span(
            "issue_service.delete_issue", issue_id=str(issue_id), user_id=str(user_id)
        ):
            issue = await self._get_mutable_issue(issue_id, user_id, action="delete")

            await self.image_service.remove(issue.image_url)
            await self.issue_repository.delete(issue_id)
            removed_votes = await self.vote_repository.delete_by_issue(issue_id)

            logfire.info(
                "Issue deleted", issue_id=str(issue_id), removed_votes=removed_votes
            )

    async def change_status(self, issue_id: IssueId, status: Optional[str]) -> Issue:
        """Set an issue's status.

        No ownership check: any authenticated user may change any issue's
        status, and any transition between statuses is allowed.

        Raises:
            ValidationError: If the status is not in the closed set
            NotFoundError: If the issue doesn't exist
        """
        with logfire.span(
            "issue_service.change_status", issue_id=str(issue_id), status=status
        ):
            new_status = IssueStatus.parse(status)
            if new_status is None:
                allowed = ", ".join(s.value for s in IssueStatus)
                raise ValidationError(f"Invalid status. Must be one of: {allowed}")

            issue = await self.get_issue(issue_id)
            updated = await self.issue_repository.save(
                issue.model_copy(
                    update={"status": new_status, "updated_at": utc_now()}
                )
            )

            logfire.info(
                "Issue status changed",
                issue_id=str(issue_id),
                old_status=issue.status.value,
                new_status=new_status.value,
            )
            return updated

    async def _get_mutable_issue(
        self, issue_id: IssueId, user_id: UserId, action: str
    ) -> Issue:
        """Load an issue the user is allowed to edit or delete."""
        issue = await self.get_issue(issue_id)

        if not issue.is_owned_by(user_id):
            logfire.warn(
                "Non-owner mutation attempt",
                issue_id=str(issue_id),
                user_id=str(user_id),
                action=action,
            )
            raise NotAuthorizedError("issue", str(issue_id), str(user_id), action)

        if not issue.is_pending:
            logfire.warn(
                "Mutation of non-pending issue",
                issue_id=str(issue_id),
                status=issue.status.value,
                action=action,
            )
            raise IssueLockedError(str(issue_id), issue.status.value, action)

        return issue
