"""Unit tests for the Account aggregate."""

import pytest

from roster_identity import Account, Email, InvalidEmailError, Role


class TestEmail:
    def test_email_is_trimmed_and_lowercased(self):
        assert Email("  Teacher@Example.COM ").value == "teacher@example.com"

    def test_empty_email_is_rejected(self):
        with pytest.raises(InvalidEmailError):
            Email("   ")


class TestAccount:
    def test_new_account_defaults(self):
        account = Account.create("teacher@example.com", "Maria Lopez", "hash")

        assert account.is_active is True
        assert account.roles == frozenset({"teacher"})
        assert account.password_hash == "hash"

    def test_without_secret_drops_only_the_hash(self):
        account = Account.create("teacher@example.com", "Maria Lopez", "hash")

        public = account.without_secret()

        assert public.password_hash is None
        assert public.id == account.id
        assert public.email == account.email
        assert public.roles == account.roles
        assert account.password_hash == "hash"

    def test_grant_and_revoke_roles(self):
        account = Account.create("teacher@example.com", "Maria Lopez", "hash")

        account.grant_role(Role.ADMIN)
        account.revoke_role("teacher")

        assert account.roles == frozenset({"admin"})
        assert account.has_any_role(["admin"])
        assert not account.has_any_role([Role.TEACHER])

    def test_unknown_role_is_rejected(self):
        account = Account.create("teacher@example.com", "Maria Lopez", "hash")

        with pytest.raises(ValueError):
            account.grant_role("principal")

    def test_deactivate_and_activate(self):
        account = Account.create("teacher@example.com", "Maria Lopez", "hash")

        account.deactivate()
        assert account.is_active is False

        account.activate()
        assert account.is_active is True
