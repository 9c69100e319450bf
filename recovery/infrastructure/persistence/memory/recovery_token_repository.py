"""In-memory recovery token storage.

Dict keyed by token string. No external dependencies - useful for testing
and development. Not suitable for multiple processes; tokens are lost on
restart.
"""

import asyncio
from dataclasses import replace
from datetime import UTC, datetime

from uuid_extensions import uuid7

from recovery.core.result import Failure, Result, Success
from recovery.domain.entities.recovery_token import RecoveryToken
from recovery.domain.errors import PersistenceError


class InMemoryRecoveryTokenRepository:
    """Dict-backed RecoveryTokenRepository.

    A single asyncio.Lock serializes mutations, so ``consume`` is atomic
    within one event loop.

    Usage:
        ```python
        repo = InMemoryRecoveryTokenRepository()
        result = await repo.save(token, "user@example.com", expiration)
        ```
    """

    def __init__(self) -> None:
        """Create an empty store."""
        self._tokens: dict[str, RecoveryToken] = {}
        self._lock = asyncio.Lock()

    @property
    def records(self) -> list[RecoveryToken]:
        """Snapshot of every stored record."""
        return list(self._tokens.values())

    async def save(
        self,
        token: str,
        email: str,
        expiration: datetime,
    ) -> Result[RecoveryToken, PersistenceError]:
        """Insert a record; a token already stored is a PersistenceError."""
        async with self._lock:
            if token in self._tokens:
                return Failure(
                    error=PersistenceError(
                        message="Recovery token already exists",
                        details={"operation": "save"},
                    )
                )
            record = RecoveryToken(
                id=uuid7(),
                token=token,
                email=email,
                expiration=expiration,
                created_at=datetime.now(UTC),
            )
            self._tokens[token] = record
            return Success(value=record)

    async def find_valid(
        self,
        token: str,
        now: datetime,
    ) -> Result[list[RecoveryToken], PersistenceError]:
        """Return the record for ``token`` if it is live at ``now``."""
        record = self._tokens.get(token)
        if record is None or not record.is_live(now):
            return Success(value=[])
        return Success(value=[record])

    async def consume(
        self,
        token: str,
        now: datetime,
    ) -> Result[RecoveryToken | None, PersistenceError]:
        """Mark a live token consumed under the lock.

        Returns:
            Success(RecoveryToken) with consumed_at set, or Success(None) if
            the token is unknown, expired or already consumed.
        """
        async with self._lock:
            record = self._tokens.get(token)
            if record is None or not record.is_live(now):
                return Success(value=None)
            consumed = replace(record, consumed_at=now)
            self._tokens[token] = consumed
            return Success(value=consumed)

    async def find_by_email(
        self, email: str
    ) -> Result[list[RecoveryToken], PersistenceError]:
        """Return every record for ``email`` (newest first)."""
        matches = [r for r in self._tokens.values() if r.email == email]
        matches.sort(key=lambda r: r.created_at, reverse=True)
        return Success(value=matches)

    async def delete_expired(self, now: datetime) -> Result[int, PersistenceError]:
        """Delete records with ``expiration <= now``; return how many."""
        async with self._lock:
            expired = [t for t, r in self._tokens.items() if r.is_expired(now)]
            for token in expired:
                del self._tokens[token]
            return Success(value=len(expired))
