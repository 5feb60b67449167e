"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from civicsync.application.usecase.base import BaseUseCase, CamelModel
from civicsync.domain.service import UserService
from civicsync.domain.value import UserId

from .common import UserInfo


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # From the verified token


class GetCurrentUserResponse(CamelModel):
    """Get current user response."""

    user: UserInfo


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting the authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Load the user named by the token.

        Raises:
            NotFoundError: If the user no longer exists
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return GetCurrentUserResponse(user=UserInfo.from_user(user))
