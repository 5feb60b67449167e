"""Login use case."""

from pydantic import BaseModel

from civicsync.application.usecase.base import BaseUseCase, CamelModel
from civicsync.domain.error import ValidationError
from civicsync.domain.service import JWTService, UserService

from .common import UserInfo


class LoginRequest(BaseModel):
    """Login request."""

    email: str | None = None
    password: str | None = None


class LoginResponse(CamelModel):
    """Login response."""

    message: str = "Login successful"
    token: str
    user: UserInfo


class LoginUseCase(BaseUseCase):
    """Use case for exchanging credentials for a JWT."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            ValidationError: If email or password is missing
            InvalidCredentialsError: If the credentials don't match a user
        """
        if not (request.email and request.password):
            raise ValidationError("Email and password are required")

        user = await self.user_service.authenticate(request.email, request.password)
        token = self.jwt_service.create_token(str(user.id), user.email)
        return LoginResponse(token=token, user=UserInfo.from_user(user))
