"""Domain value objects for CivicSync.

Value objects are immutable and defined by their values, not identity.
"""

from datetime import datetime, timezone
from enum import Enum
from pathlib import PurePath
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict


def as_utc(value: datetime) -> datetime:
    """Convert to UTC. Naive values are read as server-local time."""
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# Stored timestamps are always timezone-aware UTC
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class IssueCategory(str, Enum):
    """Closed set of issue categories."""

    ROAD = "Road"
    WATER = "Water"
    SANITATION = "Sanitation"
    ELECTRICITY = "Electricity"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: str | None) -> "IssueCategory | None":
        """Return the matching category, or None for values outside the set."""
        try:
            return cls(value)
        except ValueError:
            return None


class IssueStatus(str, Enum):
    """Issue lifecycle stage.

    Ordered Pending -> In Progress -> Resolved, but any transition is allowed.
    """

    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"

    @classmethod
    def parse(cls, value: str | None) -> "IssueStatus | None":
        """Return the matching status, or None for values outside the set."""
        try:
            return cls(value)
        except ValueError:
            return None


class IssueSortOrder(str, Enum):
    """Sort order for issue listings."""

    NEWEST = "newest"  # Sort by created_at DESC
    MOST_VOTED = "most-voted"  # Sort by vote_count DESC

    @classmethod
    def parse(cls, value: str | None) -> "IssueSortOrder | None":
        """Return the matching sort order, or None to keep collection order."""
        try:
            return cls(value)
        except ValueError:
            return None


# Sentinel accepted by the category and status filters meaning "no filter"
FILTER_ALL = "all"


class ImageUpload(BaseModel):
    """An image file received with a multipart request."""

    model_config = ConfigDict(frozen=True)

    filename: str
    content_type: str
    content: bytes

    @property
    def extension(self) -> str:
        """Lowercased file extension including the dot (e.g. '.png')."""
        return PurePath(self.filename).suffix.lower()

    @property
    def size(self) -> int:
        return len(self.content)
