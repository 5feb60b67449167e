"""Vote entity.

Each user can endorse a given issue at most once.
"""

from pydantic import Field

from civicsync.domain.model.common import DomainModel
from civicsync.domain.value import IssueId, UserId, UtcDatetime, VoteId, utc_now


class Vote(DomainModel):
    """A single endorsement of an issue by a user."""

    id: VoteId
    user_id: UserId
    issue_id: IssueId
    created_at: UtcDatetime = Field(default_factory=utc_now)
