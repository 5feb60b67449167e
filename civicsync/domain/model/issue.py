"""Issue aggregate root.

Issues are citizen-submitted reports of civic problems. Owners may edit or
delete an issue only while it is still Pending.
"""

from typing import Optional

from pydantic import Field

from civicsync.domain.model.common import DomainModel
from civicsync.domain.value import (
    IssueCategory,
    IssueId,
    IssueStatus,
    UserId,
    UtcDatetime,
    utc_now,
)


class Issue(DomainModel):
    """Issue aggregate root.

    vote_count is a denormalized count of the votes referencing this issue.
    """

    id: IssueId
    user_id: UserId
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: IssueCategory
    location: str = Field(min_length=1)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    status: IssueStatus = IssueStatus.PENDING
    image_url: Optional[str] = None
    vote_count: int = Field(default=0, ge=0)
    created_at: UtcDatetime = Field(default_factory=utc_now)
    updated_at: UtcDatetime = Field(default_factory=utc_now)

    @property
    def is_pending(self) -> bool:
        return self.status == IssueStatus.PENDING

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.user_id == user_id
