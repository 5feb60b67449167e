"""In-memory repository implementations.

These back the running service: collections live for the lifetime of the
process and are discarded on shutdown.
"""

from .issue import InMemoryIssueRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryIssueRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
