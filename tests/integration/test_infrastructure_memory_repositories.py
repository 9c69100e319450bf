"""Integration tests for the in-memory repositories.

These back the service tests, so their store semantics must match the
SQLAlchemy implementations (strict expiry, atomic consume).
"""

import asyncio
from datetime import UTC, datetime, timedelta

import pytest
from uuid_extensions import uuid7

from recovery.core.result import Failure, Success
from recovery.domain.entities import Account
from recovery.domain.errors import PersistenceError
from recovery.infrastructure.persistence.memory import (
    InMemoryAccountRepository,
    InMemoryRecoveryTokenRepository,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
TOKEN = "b" * 64


@pytest.mark.integration
class TestInMemoryRecoveryTokenRepository:
    """Store semantics for recovery tokens."""

    async def test_save_and_find_valid(self):
        repo = InMemoryRecoveryTokenRepository()

        saved = await repo.save(TOKEN, "user@example.com", NOW + timedelta(minutes=30))
        found = await repo.find_valid(TOKEN, NOW)

        assert isinstance(saved, Success)
        assert found == Success(value=[saved.value])

    async def test_save_duplicate_token_fails(self):
        repo = InMemoryRecoveryTokenRepository()
        await repo.save(TOKEN, "user@example.com", NOW + timedelta(minutes=30))

        result = await repo.save(TOKEN, "other@example.com", NOW + timedelta(minutes=30))

        assert isinstance(result, Failure)
        assert isinstance(result.error, PersistenceError)

    async def test_find_valid_excludes_expiration_equal_to_now(self):
        repo = InMemoryRecoveryTokenRepository()
        await repo.save(TOKEN, "user@example.com", NOW)

        assert await repo.find_valid(TOKEN, NOW) == Success(value=[])

    async def test_consume_marks_once(self):
        repo = InMemoryRecoveryTokenRepository()
        await repo.save(TOKEN, "user@example.com", NOW + timedelta(minutes=30))

        first = await repo.consume(TOKEN, NOW)
        second = await repo.consume(TOKEN, NOW)

        assert isinstance(first, Success)
        assert first.value.consumed_at == NOW
        assert second == Success(value=None)
        assert await repo.find_valid(TOKEN, NOW) == Success(value=[])

    async def test_consume_concurrently_has_one_winner(self):
        repo = InMemoryRecoveryTokenRepository()
        await repo.save(TOKEN, "user@example.com", NOW + timedelta(minutes=30))

        results = await asyncio.gather(*(repo.consume(TOKEN, NOW) for _ in range(10)))

        assert sum(1 for r in results if r.value is not None) == 1

    async def test_consume_expired_token_returns_none(self):
        repo = InMemoryRecoveryTokenRepository()
        await repo.save(TOKEN, "user@example.com", NOW)

        assert await repo.consume(TOKEN, NOW) == Success(value=None)

    async def test_find_by_email_returns_all_tokens(self):
        repo = InMemoryRecoveryTokenRepository()
        await repo.save("c" * 64, "user@example.com", NOW + timedelta(minutes=30))
        await repo.save("d" * 64, "user@example.com", NOW + timedelta(minutes=30))
        await repo.save("e" * 64, "other@example.com", NOW + timedelta(minutes=30))

        result = await repo.find_by_email("user@example.com")

        assert sorted(r.token for r in result.value) == ["c" * 64, "d" * 64]

    async def test_delete_expired(self):
        repo = InMemoryRecoveryTokenRepository()
        await repo.save("c" * 64, "user@example.com", NOW)
        await repo.save("d" * 64, "user@example.com", NOW + timedelta(seconds=1))

        result = await repo.delete_expired(NOW)

        assert result == Success(value=1)
        assert [r.token for r in repo.records] == ["d" * 64]


@pytest.mark.integration
class TestInMemoryAccountRepository:
    """Account lookup and password update."""

    async def test_find_by_email_is_case_insensitive(self):
        account = Account(id=uuid7(), email="user@example.com", password_hash="h1")
        repo = InMemoryAccountRepository([account])

        assert await repo.find_by_email("USER@example.com") == Success(value=account)
        assert await repo.find_by_email("nobody@example.com") == Success(value=None)

    async def test_update_password_replaces_hash(self):
        account = Account(id=uuid7(), email="user@example.com", password_hash="h1")
        repo = InMemoryAccountRepository([account])

        assert await repo.update_password(account.id, "h2") == Success(value=None)

        updated = (await repo.find_by_email("user@example.com")).value
        assert updated.password_hash == "h2"
        assert updated.id == account.id

    async def test_save_adds_account(self):
        repo = InMemoryAccountRepository()
        account = Account(id=uuid7(), email="new@example.com", password_hash="h")

        assert await repo.save(account) == Success(value=None)

        assert await repo.find_by_email("new@example.com") == Success(value=account)

    async def test_save_duplicate_email_fails(self):
        repo = InMemoryAccountRepository()
        await repo.save(Account(id=uuid7(), email="new@example.com", password_hash="h"))

        result = await repo.save(
            Account(id=uuid7(), email="NEW@example.com", password_hash="h")
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, PersistenceError)
