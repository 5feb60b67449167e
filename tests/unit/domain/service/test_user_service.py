"""Unit tests for UserService."""

import threading
from uuid import uuid4

import pytest
from dishka import AsyncContainer

from civicsync.domain.error import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from civicsync.domain.service import UserService
from civicsync.domain.service import user_service as user_service_module
from civicsync.domain.value import UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register."""

    @pytest.mark.asyncio
    async def test_register_lowercases_email_and_hashes_password(
        self, unit_env: AsyncContainer
    ):
        service = await unit_env.get(UserService)

        user = await service.register("Alice@Example.com", "secret1", "Alice")

        assert user.email == "alice@example.com"
        assert user.password_hash != "secret1"

    @pytest.mark.asyncio
    async def test_duplicate_email_differs_only_in_case(self, unit_env: AsyncContainer):
        service = await unit_env.get(UserService)
        await service.register("bob@example.com", "secret1", "Bob")

        with pytest.raises(EmailAlreadyRegisteredError):
            await service.register("BOB@example.com", "secret2", "Bobby")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,password,message",
        [
            ("not-an-email", "secret1", "Invalid email format"),
            ("a b@example.com", "secret1", "Invalid email format"),
            ("carol@example.com", "12345", "at least 6 characters"),
        ],
    )
    async def test_invalid_input(
        self, unit_env: AsyncContainer, email, password, message
    ):
        service = await unit_env.get(UserService)

        with pytest.raises(ValidationError, match=message):
            await service.register(email, password, "Carol")


class TestAuthenticate:
    """Tests for authenticate."""

    @pytest.mark.asyncio
    async def test_correct_password_any_email_case(self, unit_env: AsyncContainer):
        service = await unit_env.get(UserService)
        registered = await service.register("dave@example.com", "secret1", "Dave")

        user = await service.authenticate("DAVE@EXAMPLE.COM", "secret1")

        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env: AsyncContainer):
        service = await unit_env.get(UserService)
        await service.register("erin@example.com", "secret1", "Erin")

        with pytest.raises(InvalidCredentialsError, match="Invalid email or password"):
            await service.authenticate("erin@example.com", "wrong-password")

    @pytest.mark.asyncio
    async def test_unknown_email(self, unit_env: AsyncContainer):
        service = await unit_env.get(UserService)

        with pytest.raises(InvalidCredentialsError):
            await service.authenticate("nobody@example.com", "secret1")


@pytest.mark.asyncio
async def test_get_by_id_missing_user(unit_env: AsyncContainer):
    service = await unit_env.get(UserService)

    with pytest.raises(NotFoundError):
        await service.get_by_id(UserId(uuid4()))


class TestPasswordHashingThread:
    """bcrypt work runs in the threadpool, off the event loop."""

    @pytest.mark.asyncio
    async def test_hash_and_verify_run_off_loop_thread(
        self, unit_env: AsyncContainer, monkeypatch
    ):
        service = await unit_env.get(UserService)
        loop_thread = threading.get_ident()
        seen_threads = []

        def recording(original):
            def wrapper(*args):
                seen_threads.append(threading.get_ident())
                return original(*args)

            return wrapper

        monkeypatch.setattr(
            user_service_module,
            "hash_password",
            recording(user_service_module.hash_password),
        )
        monkeypatch.setattr(
            user_service_module,
            "verify_password",
            recording(user_service_module.verify_password),
        )

        await service.register("carol@example.com", "secret1", "Carol")
        await service.authenticate("carol@example.com", "secret1")

        assert len(seen_threads) == 2
        assert loop_thread not in seen_threads
