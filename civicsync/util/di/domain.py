"""Domain layer DI providers."""

from dishka import Scope, provide

from civicsync.config import AnalyticsSettings, AuthSettings, UploadSettings
from civicsync.domain.repository import (
    IssueRepository,
    UserRepository,
    VoteRepository,
)
from civicsync.domain.service import (
    AnalyticsService,
    ImageService,
    ImageStorage,
    IssueService,
    JWTService,
    UserService,
    VoteService,
)
from civicsync.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; the repositories they wrap are shared.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, auth_settings=auth_settings
        )

    @provide
    def get_image_service(
        self, storage: ImageStorage, upload_settings: UploadSettings
    ) -> ImageService:
        """Provide image domain service."""
        return ImageService(storage=storage, upload_settings=upload_settings)

    @provide
    def get_issue_service(
        self,
        issue_repository: IssueRepository,
        vote_repository: VoteRepository,
        image_service: ImageService,
    ) -> IssueService:
        """Provide issue domain service."""
        return IssueService(
            issue_repository=issue_repository,
            vote_repository=vote_repository,
            image_service=image_service,
        )

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, issue_repository: IssueRepository
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository, issue_repository=issue_repository
        )

    @provide
    def get_analytics_service(
        self,
        issue_repository: IssueRepository,
        vote_repository: VoteRepository,
        user_repository: UserRepository,
        analytics_settings: AnalyticsSettings,
    ) -> AnalyticsService:
        """Provide analytics domain service."""
        return AnalyticsService(
            issue_repository=issue_repository,
            vote_repository=vote_repository,
            user_repository=user_repository,
            analytics_settings=analytics_settings,
        )
