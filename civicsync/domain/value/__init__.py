"""Domain value objects for CivicSync."""

from civicsync.domain.value.identifiers import IssueId, UserId, VoteId
from civicsync.domain.value.types import (
    FILTER_ALL,
    ImageUpload,
    IssueCategory,
    IssueSortOrder,
    IssueStatus,
    UtcDatetime,
    as_utc,
    utc_now,
)

__all__ = [
    # Identifiers
    "UserId",
    "IssueId",
    "VoteId",
    # Types
    "FILTER_ALL",
    "ImageUpload",
    "IssueCategory",
    "IssueSortOrder",
    "IssueStatus",
    "UtcDatetime",
    "as_utc",
    "utc_now",
]
