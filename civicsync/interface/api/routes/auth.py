"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status

from civicsync.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from civicsync.domain.error import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from civicsync.domain.service import JWTService
from civicsync.interface.api.security import authenticate

router = APIRouter(prefix="/api/auth", tags=["authentication"], route_class=DishkaRoute)


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create an account and return a token for it.

    Raises:
        HTTPException: 400 if a field is missing or invalid or the email is taken
    """
    try:
        return await register_use_case.execute(request)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EmailAlreadyRegisteredError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User with this email already exists",
        )


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange email and password for a token.

    Raises:
        HTTPException: 400 if fields are missing or the credentials are wrong
    """
    try:
        return await login_use_case.execute(request)
    except (ValidationError, InvalidCredentialsError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetCurrentUserResponse:
    """Get the authenticated user.

    Raises:
        HTTPException: 401/403 on a missing or bad token, 404 if the user is gone
    """
    payload = authenticate(jwt_service, authorization)

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(user_id=payload.user_id)
        )
    except NotFoundError:
        logfire.warn("Token for missing user", user_id=payload.user_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
