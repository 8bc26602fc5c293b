"""Unit tests for IdentityManager."""

from unittest.mock import AsyncMock

import pytest

from notebook_auth.exceptions import CredentialCreationError, DuplicateEmailError
from notebook_auth.schemas import IdentityData
from notebook_auth.services import (
    IdentityManager,
    PasswordHashingService,
    normalize_email,
)

TEST_EMAIL = "User@Example.com"
TEST_PASSWORD = "SecurePassword123!"


def test_normalize_email():
    assert normalize_email("  User@Example.COM ") == "user@example.com"


class TestIdentityManagerCreate:
    """Tests for identity creation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.repo = AsyncMock()
        self.repo.add.side_effect = lambda identity: identity
        self.password_service = PasswordHashingService(rounds=4)
        self.manager = IdentityManager(self.repo, self.password_service)

    async def test_create_stores_hashed_identity(self):
        identity = await self.manager.create(TEST_EMAIL, TEST_PASSWORD)

        self.repo.add.assert_awaited_once()
        stored: IdentityData = self.repo.add.await_args.args[0]
        assert stored is identity
        assert stored.email == TEST_EMAIL
        assert stored.normalized_email == "user@example.com"
        assert stored.password_hash != TEST_PASSWORD
        assert self.password_service.verify(TEST_PASSWORD, stored.password_hash)
        assert stored.email_confirmed is False
        assert stored.created_at is not None

    async def test_create_marks_email_confirmed_on_request(self):
        identity = await self.manager.create(
            TEST_EMAIL,
            TEST_PASSWORD,
            email_confirmed=True,
        )

        assert identity.email_confirmed is True

    async def test_create_rejects_weak_password_with_all_reasons(self):
        with pytest.raises(CredentialCreationError) as exc_info:
            await self.manager.create(TEST_EMAIL, "weak")

        assert exc_info.value.errors == self.password_service.validate("weak")
        assert len(exc_info.value.reasons) == 4
        self.repo.add.assert_not_awaited()

    async def test_duplicate_from_storage_propagates(self):
        self.repo.add.side_effect = DuplicateEmailError(TEST_EMAIL)

        with pytest.raises(DuplicateEmailError):
            await self.manager.create(TEST_EMAIL, TEST_PASSWORD)

    def test_password_hash_not_in_repr(self):
        identity = IdentityData(
            id="1",
            email=TEST_EMAIL,
            normalized_email="user@example.com",
            password_hash="secret-hash",
            email_confirmed=True,
        )

        assert "secret-hash" not in repr(identity)


class TestIdentityManagerLookup:
    """Tests for lookups and password checks."""

    def setup_method(self):
        """Set up test fixtures."""
        self.repo = AsyncMock()
        self.password_service = PasswordHashingService(rounds=4)
        self.manager = IdentityManager(self.repo, self.password_service)

    async def test_find_by_email_uses_normalized_form(self):
        self.repo.find_by_normalized_email.return_value = None

        result = await self.manager.find_by_email("  User@Example.COM ")

        assert result is None
        self.repo.find_by_normalized_email.assert_awaited_once_with(
            "user@example.com",
        )

    def test_check_password(self):
        identity = IdentityData(
            id="1",
            email=TEST_EMAIL,
            normalized_email="user@example.com",
            password_hash=self.password_service.hash(TEST_PASSWORD),
            email_confirmed=True,
        )

        assert self.manager.check_password(identity, TEST_PASSWORD) is True
        assert self.manager.check_password(identity, "Wrong123!") is False
