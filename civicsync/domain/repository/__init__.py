"""Repository interfaces for CivicSync domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from civicsync.domain.repository.issue import IssueRepository
from civicsync.domain.repository.user import UserRepository
from civicsync.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "IssueRepository",
    "VoteRepository",
]
