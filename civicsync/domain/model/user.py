"""User aggregate root."""

from pydantic import Field

from civicsync.domain.model.common import DomainModel
from civicsync.domain.value import UserId, UtcDatetime, utc_now


class User(DomainModel):
    """A registered citizen.

    Email is unique case-insensitively and stored lowercased.
    """

    id: UserId
    email: str = Field(min_length=3, max_length=255)
    name: str = Field(min_length=1, max_length=255)
    password_hash: str
    created_at: UtcDatetime = Field(default_factory=utc_now)
