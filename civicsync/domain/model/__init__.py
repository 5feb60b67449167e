"""Domain model entities for CivicSync."""

from civicsync.domain.model.issue import Issue
from civicsync.domain.model.user import User
from civicsync.domain.model.vote import Vote

__all__ = [
    "User",
    "Issue",
    "Vote",
]
