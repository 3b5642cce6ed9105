"""
Unit tests for CredentialService.
"""
import asyncio
import time
from unittest.mock import AsyncMock, patch

import pytest
from auth_backend.application.services.credential_service import CredentialService
from auth_backend.core.security import hash_password, verify_password
from auth_backend.domain.exceptions import DuplicateEmailError


class TestCheckEmailExists:
    """Tests for check_email_exists"""

    @pytest.mark.asyncio
    async def test_true_when_record_found(self, user_factory):
        repo = AsyncMock()
        repo.find_by_email.return_value = user_factory()
        assert await CredentialService(repo).check_email_exists("test@example.com") is True
        repo.find_by_email.assert_awaited_once_with("test@example.com")

    @pytest.mark.asyncio
    async def test_false_when_absent(self):
        repo = AsyncMock()
        repo.find_by_email.return_value = None
        assert await CredentialService(repo).check_email_exists("nobody@example.com") is False


class TestRegisterUser:
    """Tests for register_user"""

    @pytest.mark.asyncio
    async def test_persists_hash_not_plaintext(self, memory_user_repo, mock_settings):
        service = CredentialService(memory_user_repo)

        result = await service.register_user(
            name="Ann", email="ann@example.com", password="s3cret!", image="ann.png"
        )

        assert result is None
        assert len(memory_user_repo.documents) == 1
        stored = memory_user_repo.documents[0]
        assert stored.id is not None
        assert stored.name == "Ann"
        assert stored.image == "ann.png"
        assert stored.hashed_password != "s3cret!"
        assert verify_password("s3cret!", stored.hashed_password) is True

    @pytest.mark.asyncio
    async def test_duplicate_from_store_propagates(self, memory_user_repo, mock_settings):
        service = CredentialService(memory_user_repo)
        await service.register_user(name="Ann", email="ann@example.com", password="one")

        with pytest.raises(DuplicateEmailError):
            await service.register_user(name="Other Ann", email="ann@example.com", password="two")

        assert len(memory_user_repo.documents) == 1
        assert memory_user_repo.documents[0].name == "Ann"

    @pytest.mark.asyncio
    async def test_store_error_propagates(self, mock_settings):
        repo = AsyncMock()
        repo.save.side_effect = RuntimeError("Error saving user: network")
        with pytest.raises(RuntimeError, match="network"):
            await CredentialService(repo).register_user(name="Ann", email="a@example.com", password="pw")


class TestAuthenticate:
    """Tests for authenticate"""

    @pytest.mark.asyncio
    async def test_returns_user_on_match(self, user_factory, mock_settings):
        user = user_factory(hashed_password=hash_password("validpass123"))
        repo = AsyncMock()
        repo.find_by_email.return_value = user

        assert await CredentialService(repo).authenticate("test@example.com", "validpass123") is user

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_are_identical(self, user_factory, mock_settings):
        user = user_factory(hashed_password=hash_password("correctpass"))
        known = AsyncMock()
        known.find_by_email.return_value = user
        unknown = AsyncMock()
        unknown.find_by_email.return_value = None

        wrong_password = await CredentialService(known).authenticate("test@example.com", "wrongpass")
        no_such_user = await CredentialService(unknown).authenticate("ghost@example.com", "wrongpass")

        assert wrong_password is None
        assert no_such_user is None


class TestEventLoopResponsiveness:
    """Password hashing and verification must not block other requests"""

    @staticmethod
    async def _heartbeat(stop: asyncio.Event, ticks: list) -> None:
        while not stop.is_set():
            ticks.append(time.perf_counter())
            await asyncio.sleep(0.01)

    @staticmethod
    def _max_gap(ticks: list) -> float:
        return max(later - earlier for earlier, later in zip(ticks, ticks[1:]))

    @pytest.mark.asyncio
    async def test_authenticate_keeps_loop_scheduling(self, user_factory):
        def slow_verify(plain_password, hashed_password):
            time.sleep(0.3)
            return True

        repo = AsyncMock()
        repo.find_by_email.return_value = user_factory()
        service = CredentialService(repo)
        stop, ticks = asyncio.Event(), []

        with patch(
            "auth_backend.application.services.credential_service.verify_password",
            side_effect=slow_verify,
        ):
            heartbeat = asyncio.create_task(self._heartbeat(stop, ticks))
            results = await asyncio.gather(
                *(service.authenticate("test@example.com", "pw") for _ in range(3))
            )
            stop.set()
            await heartbeat

        assert all(result is not None for result in results)
        assert len(ticks) > 10
        assert self._max_gap(ticks) < 0.2

    @pytest.mark.asyncio
    async def test_register_user_keeps_loop_scheduling(self, memory_user_repo):
        def slow_hash(plain_password):
            time.sleep(0.3)
            return "$2b$04$slowhash"

        service = CredentialService(memory_user_repo)
        stop, ticks = asyncio.Event(), []

        with patch(
            "auth_backend.application.services.credential_service.hash_password",
            side_effect=slow_hash,
        ):
            heartbeat = asyncio.create_task(self._heartbeat(stop, ticks))
            await service.register_user(name="Ann", email="ann@example.com", password="pw")
            stop.set()
            await heartbeat

        assert memory_user_repo.documents[0].hashed_password == "$2b$04$slowhash"
        assert self._max_gap(ticks) < 0.2
