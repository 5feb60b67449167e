"""Persistence infrastructure providers."""

from dishka import Scope, provide
import logfire

from civicsync.config import Settings
from civicsync.domain.repository import (
    IssueRepository,
    UserRepository,
    VoteRepository,
)
from civicsync.persistence.repository.inmemory import (
    InMemoryIssueRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from civicsync.persistence.seed import sample_issues, sample_users, sample_votes
from civicsync.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Repositories are APP-scoped: one set of collections shared by every
    request for the lifetime of the process, seeded with sample data unless
    disabled in settings.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_user_repository(self, settings: Settings) -> UserRepository:
        """Provide User repository."""
        users = sample_users(settings.auth) if settings.seed_sample_data else []
        logfire.info("User store ready", seeded=len(users))
        return InMemoryUserRepository(users)

    @provide(scope=Scope.APP)
    def get_issue_repository(self, settings: Settings) -> IssueRepository:
        """Provide Issue repository."""
        issues = sample_issues() if settings.seed_sample_data else []
        logfire.info("Issue store ready", seeded=len(issues))
        return InMemoryIssueRepository(issues)

    @provide(scope=Scope.APP)
    def get_vote_repository(self, settings: Settings) -> VoteRepository:
        """Provide Vote repository."""
        votes = sample_votes() if settings.seed_sample_data else []
        logfire.info("Vote store ready", seeded=len(votes))
        return InMemoryVoteRepository(votes)
