"""Application layer DI providers."""

from dishka import Scope, provide

from civicsync.application.usecase.analytics import GetAnalyticsUseCase
from civicsync.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from civicsync.application.usecase.issue import (
    CreateIssueUseCase,
    DeleteIssueUseCase,
    GetIssueUseCase,
    IssueDecorator,
    ListIssuesUseCase,
    ListMyIssuesUseCase,
    UpdateIssueUseCase,
    UpdateStatusUseCase,
)
from civicsync.application.usecase.vote import CastVoteUseCase
from civicsync.config import PaginationSettings
from civicsync.domain.service import (
    AnalyticsService,
    IssueService,
    JWTService,
    UserService,
    VoteService,
)
from civicsync.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    # Issue use cases
    @provide
    def get_issue_decorator(
        self, user_service: UserService, vote_service: VoteService
    ) -> IssueDecorator:
        return IssueDecorator(user_service=user_service, vote_service=vote_service)

    @provide
    def get_create_issue_use_case(
        self, issue_service: IssueService, decorator: IssueDecorator
    ) -> CreateIssueUseCase:
        """Provide create issue use case."""
        return CreateIssueUseCase(issue_service=issue_service, decorator=decorator)

    @provide
    def get_list_issues_use_case(
        self,
        issue_service: IssueService,
        decorator: IssueDecorator,
        pagination_settings: PaginationSettings,
    ) -> ListIssuesUseCase:
        """Provide list issues use case."""
        return ListIssuesUseCase(
            issue_service=issue_service,
            decorator=decorator,
            pagination_settings=pagination_settings,
        )

    @provide
    def get_list_my_issues_use_case(
        self, issue_service: IssueService, decorator: IssueDecorator
    ) -> ListMyIssuesUseCase:
        """Provide list my issues use case."""
        return ListMyIssuesUseCase(issue_service=issue_service, decorator=decorator)

    @provide
    def get_get_issue_use_case(
        self, issue_service: IssueService, decorator: IssueDecorator
    ) -> GetIssueUseCase:
        """Provide get issue use case."""
        return GetIssueUseCase(issue_service=issue_service, decorator=decorator)

    @provide
    def get_update_issue_use_case(
        self, issue_service: IssueService
    ) -> UpdateIssueUseCase:
        """Provide update issue use case."""
        return UpdateIssueUseCase(issue_service=issue_service)

    @provide
    def get_delete_issue_use_case(
        self, issue_service: IssueService
    ) -> DeleteIssueUseCase:
        """Provide delete issue use case."""
        return DeleteIssueUseCase(issue_service=issue_service)

    @provide
    def get_update_status_use_case(
        self, issue_service: IssueService
    ) -> UpdateStatusUseCase:
        """Provide update status use case."""
        return UpdateStatusUseCase(issue_service=issue_service)

    # Vote use cases
    @provide
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    # Analytics use cases
    @provide
    def get_analytics_use_case(
        self, analytics_service: AnalyticsService
    ) -> GetAnalyticsUseCase:
        """Provide analytics use case."""
        return GetAnalyticsUseCase(analytics_service=analytics_service)
