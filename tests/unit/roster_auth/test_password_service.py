"""Unit tests for PasswordHashingService."""

import pytest

from roster_auth.services import PasswordHashingService


@pytest.fixture
def service() -> PasswordHashingService:
    # Low work factor keeps the suite fast
    return PasswordHashingService(rounds=4)


class TestHashing:
    def test_hash_is_not_plaintext(self, service):
        hashed = service.hash("Abc123")

        assert hashed != "Abc123"
        assert hashed.startswith("$2")

    def test_same_password_hashes_differently(self, service):
        assert service.hash("Abc123") != service.hash("Abc123")

    def test_work_factor_is_applied(self, service):
        assert service.hash("Abc123").split("$")[2] == "04"


class TestVerification:
    def test_correct_password_verifies(self, service):
        hashed = service.hash("Abc123")

        assert service.verify("Abc123", hashed) is True

    def test_wrong_password_fails(self, service):
        hashed = service.hash("Abc123")

        assert service.verify("abc123", hashed) is False

    def test_malformed_hash_returns_false(self, service):
        assert service.verify("Abc123", "not-a-bcrypt-hash") is False

    def test_long_multibyte_password_round_trips(self, service):
        password = "ñ" * 60  # 120 bytes in UTF-8

        hashed = service.hash(password)

        assert service.verify(password, hashed) is True
