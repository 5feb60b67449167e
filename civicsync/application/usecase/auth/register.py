"""Register use case."""

import logfire
from pydantic import BaseModel

from civicsync.application.usecase.base import BaseUseCase, CamelModel
from civicsync.domain.error import ValidationError
from civicsync.domain.service import JWTService, UserService

from .common import UserInfo


class RegisterRequest(BaseModel):
    """Register request."""

    email: str | None = None
    password: str | None = None
    name: str | None = None


class RegisterResponse(CamelModel):
    """Register response."""

    message: str = "User registered successfully"
    token: str
    user: UserInfo


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account and signing the new user in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Steps:
        1. Check all fields are present
        2. Create the user (via UserService, which validates email/password)
        3. Issue a JWT for the new user

        Raises:
            ValidationError: If a field is missing or invalid
            EmailAlreadyRegisteredError: If the email is taken
        """
        if not (request.email and request.password and request.name):
            raise ValidationError("All fields (email, password, name) are required")

        user = await self.user_service.register(
            email=request.email, password=request.password, name=request.name
        )
        token = self.jwt_service.create_token(str(user.id), user.email)

        logfire.info("Registration complete", user_id=str(user.id))
        return RegisterResponse(token=token, user=UserInfo.from_user(user))
