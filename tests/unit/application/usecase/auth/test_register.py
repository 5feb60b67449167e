"""Unit tests for the register and login use cases."""

import pytest
from dishka import AsyncContainer

from civicsync.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from civicsync.domain.error import InvalidCredentialsError, ValidationError
from civicsync.domain.service import JWTService
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_usable_token(self, unit_env: AsyncContainer):
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await use_case.execute(
            RegisterRequest(email="New@Example.com", password="secret1", name="New")
        )

        # Assert
        assert response.message == "User registered successfully"
        assert response.user.email == "new@example.com"
        payload = jwt_service.verify_token(response.token)
        assert payload.user_id == response.user.id
        assert payload.email == "new@example.com"

    @pytest.mark.asyncio
    async def test_missing_field(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(RegisterUseCase)

        with pytest.raises(ValidationError, match="All fields"):
            await use_case.execute(RegisterRequest(email="x@example.com", password="secret1"))


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_after_register(self, unit_env: AsyncContainer):
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        registered = await register.execute(
            RegisterRequest(email="pat@example.com", password="secret1", name="Pat")
        )

        response = await login.execute(
            LoginRequest(email="PAT@example.com", password="secret1")
        )

        assert response.message == "Login successful"
        assert response.user == registered.user

    @pytest.mark.asyncio
    async def test_missing_password(self, unit_env: AsyncContainer):
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(ValidationError, match="Email and password are required"):
            await login.execute(LoginRequest(email="pat@example.com"))

    @pytest.mark.asyncio
    async def test_bad_credentials(self, unit_env: AsyncContainer):
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(InvalidCredentialsError):
            await login.execute(LoginRequest(email="pat@example.com", password="secret1"))
