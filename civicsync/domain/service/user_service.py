"""User domain service."""

import re
from typing import Sequence
from uuid import uuid4

import logfire
from starlette.concurrency import run_in_threadpool

from civicsync.config import AuthSettings
from civicsync.domain.error import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from civicsync.domain.model import User
from civicsync.domain.repository import UserRepository
from civicsync.domain.value import UserId, utc_now
from civicsync.util.password import hash_password, verify_password

from .base import Service

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class UserService(Service):
    """Domain service for user registration and credential checks."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (password policy, hashing)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(self, email: str, password: str, name: str) -> User:
        """Register a new user.

        Args:
            email: Email address (unique, case-insensitive)
            password: Plaintext password
            name: Display name

        Returns:
            The created user

        Raises:
            ValidationError: If the email is malformed or the password too short
            EmailAlreadyRegisteredError: If the email is taken
        """
        with logfire.span("user_service.register", email=email):
            if not EMAIL_PATTERN.match(email):
                raise ValidationError("Invalid email format")

            if len(password) < self.auth_settings.min_password_length:
                raise ValidationError(
                    "Password must be at least "
                    f"{self.auth_settings.min_password_length} characters long"
                )

            if await self.user_repository.find_by_email(email):
                logfire.warn("Duplicate registration attempt", email=email)
                raise EmailAlreadyRegisteredError(email)

            user = User(
                id=UserId(uuid4()),
                email=email.lower(),
                name=name,
                password_hash=await run_in_threadpool(
                    hash_password, password, self.auth_settings
                ),
                created_at=utc_now(),
            )
            saved = await self.user_repository.save(user)

            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check login credentials.

        Args:
            email: Email address (any case)
            password: Plaintext password

        Returns:
            The matching user

        Raises:
            InvalidCredentialsError: If no user has this email or the password is wrong
        """
        with logfire.span("user_service.authenticate", email=email):
            user = await self.user_repository.find_by_email(email)
            if user is None or not await run_in_threadpool(
                verify_password, password, user.password_hash, self.auth_settings
            ):
                logfire.warn("Failed login", email=email)
                raise InvalidCredentialsError("Invalid email or password")

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_users_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Load several users keyed by ID; missing users are simply absent."""
        users = await self.user_repository.find_by_ids(user_ids)
        return {user.id: user for user in users}
