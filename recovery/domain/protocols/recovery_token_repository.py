"""RecoveryTokenRepository protocol (port) for domain layer.

Defines the persistence contract for recovery tokens. Infrastructure
provides SQLAlchemy and in-memory implementations.

Every method returns a Result; storage exceptions never escape an adapter.
"""

from datetime import datetime
from typing import Protocol

from recovery.core.result import Result
from recovery.domain.entities.recovery_token import RecoveryToken
from recovery.domain.errors import PersistenceError


class RecoveryTokenRepository(Protocol):
    """Protocol for recovery token persistence operations.

    Token Lifecycle:
        1. Inserted by ``save`` during issuance (never coalesced with older rows)
        2. Looked up by ``find_valid`` during redemption
        3. Optionally transitioned to CONSUMED by ``consume`` (atomic)
        4. Removed by ``delete_expired`` (storage hygiene only)

    Implementations:
        - SQLAlchemyRecoveryTokenRepository: recovery/infrastructure/persistence/repositories/
        - InMemoryRecoveryTokenRepository: recovery/infrastructure/persistence/memory/
    """

    async def save(
        self,
        token: str,
        email: str,
        expiration: datetime,
    ) -> Result[RecoveryToken, PersistenceError]:
        """Insert a new recovery token record.

        Args:
            token: Random hex token (64 characters).
            email: Account e-mail the token belongs to.
            expiration: Absolute expiration timestamp.

        Returns:
            Success(RecoveryToken) with store-assigned id.
            Failure(PersistenceError) on storage failure or duplicate token.
        """
        ...

    async def find_valid(
        self,
        token: str,
        now: datetime,
    ) -> Result[list[RecoveryToken], PersistenceError]:
        """Find unconsumed records matching ``token`` with ``expiration > now``.

        Args:
            token: Token string to look up.
            now: Reference time (strict comparison).

        Returns:
            Success(list) - empty when nothing matches; ordering irrelevant.
        """
        ...

    async def consume(
        self,
        token: str,
        now: datetime,
    ) -> Result[RecoveryToken | None, PersistenceError]:
        """Atomically transition a live token to CONSUMED.

        Single conditional update: matches only when the token exists, is
        not consumed and ``expiration > now``. Of several concurrent callers
        at most one receives the record. Transactional adapters leave the
        change uncommitted; the caller's next commit (the password update)
        makes it durable, and a rollback leaves the token live.

        Returns:
            Success(RecoveryToken) with consumed_at set, or Success(None) if
            no live token matched.
        """
        ...

    async def find_by_email(
        self, email: str
    ) -> Result[list[RecoveryToken], PersistenceError]:
        """Return every token issued for ``email`` (newest first)."""
        ...

    async def delete_expired(self, now: datetime) -> Result[int, PersistenceError]:
        """Delete records with ``expiration <= now``.

        Returns:
            Success(number of records deleted).
        """
        ...
