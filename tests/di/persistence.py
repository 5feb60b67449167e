"""Mock persistence providers for testing."""

from dishka import Scope, provide

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
from civicsync.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using empty, unseeded repositories.

    APP-scoped so state survives across requests to one test app; each test
    builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_issue_repository(self) -> IssueRepository:
        """Provide in-memory issue repository."""
        return InMemoryIssueRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()
