"""SQLAlchemyRecoveryTokenRepository - recovery token persistence.

Implements RecoveryTokenRepository over an async SQLAlchemy session.
Database exceptions are caught and returned as Failure(PersistenceError).
"""

from datetime import datetime

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from recovery.core.result import Failure, Result, Success
from recovery.domain.entities.recovery_token import RecoveryToken
from recovery.domain.errors import PersistenceError
from recovery.infrastructure.persistence.models.recovery_token import (
    RecoveryTokenModel,
)

_COLUMNS = (
    RecoveryTokenModel.id,
    RecoveryTokenModel.token,
    RecoveryTokenModel.email,
    RecoveryTokenModel.expiration,
    RecoveryTokenModel.created_at,
    RecoveryTokenModel.consumed_at,
)


def _to_domain(model: RecoveryTokenModel) -> RecoveryToken:
    """Convert database model (or returned row) to domain entity."""
    return RecoveryToken(
        id=model.id,
        token=model.token,
        email=model.email,
        expiration=model.expiration,
        created_at=model.created_at,
        consumed_at=model.consumed_at,
    )


def _failure(operation: str, error: SQLAlchemyError) -> Failure[PersistenceError]:
    return Failure(
        error=PersistenceError(
            message=f"Failed to {operation} recovery token: {type(error).__name__}",
            details={"operation": operation, "error_type": type(error).__name__},
        )
    )


class SQLAlchemyRecoveryTokenRepository:
    """SQLAlchemy implementation of RecoveryTokenRepository.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with db.get_session() as session:
        ...     repo = SQLAlchemyRecoveryTokenRepository(session)
        ...     result = await repo.find_valid("abc123...", datetime.now(UTC))
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def save(
        self,
        token: str,
        email: str,
        expiration: datetime,
    ) -> Result[RecoveryToken, PersistenceError]:
        """Insert a new recovery token row.

        A duplicate token violates the unique constraint and is reported as
        PersistenceError.
        """
        model = RecoveryTokenModel(token=token, email=email, expiration=expiration)
        try:
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        except SQLAlchemyError as e:
            await self.session.rollback()
            return _failure("save", e)
        return Success(value=_to_domain(model))

    async def find_valid(
        self,
        token: str,
        now: datetime,
    ) -> Result[list[RecoveryToken], PersistenceError]:
        """Find unconsumed rows for ``token`` with ``expiration > now``."""
        stmt = (
            select(RecoveryTokenModel)
            .where(RecoveryTokenModel.token == token)
            .where(RecoveryTokenModel.expiration > now)
            .where(RecoveryTokenModel.consumed_at.is_(None))
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            return _failure("find", e)
        return Success(value=[_to_domain(m) for m in result.scalars().all()])

    async def consume(
        self,
        token: str,
        now: datetime,
    ) -> Result[RecoveryToken | None, PersistenceError]:
        """Mark a live token consumed with one conditional UPDATE ... RETURNING.

        The WHERE clause repeats the validity check, so the database row
        lock decides the winner between concurrent redemptions.

        Does not commit. The change stays in the session transaction until
        the caller's next commit (the password update during redemption, or
        the request-scoped session on exit), so a failure before then rolls
        the token back to LIVE.
        """
        stmt = (
            update(RecoveryTokenModel)
            .where(RecoveryTokenModel.token == token)
            .where(RecoveryTokenModel.consumed_at.is_(None))
            .where(RecoveryTokenModel.expiration > now)
            .values(consumed_at=now)
            .returning(*_COLUMNS)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
            row = result.one_or_none()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return _failure("consume", e)
        return Success(value=_to_domain(row) if row is not None else None)

    async def find_by_email(
        self, email: str
    ) -> Result[list[RecoveryToken], PersistenceError]:
        """Return every token issued for ``email`` (newest first)."""
        stmt = (
            select(RecoveryTokenModel)
            .where(RecoveryTokenModel.email == email)
            .order_by(RecoveryTokenModel.created_at.desc())
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            return _failure("find", e)
        return Success(value=[_to_domain(m) for m in result.scalars().all()])

    async def delete_expired(self, now: datetime) -> Result[int, PersistenceError]:
        """Delete rows with ``expiration <= now``."""
        stmt = delete(RecoveryTokenModel).where(RecoveryTokenModel.expiration <= now)
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return _failure("delete", e)
        return Success(value=result.rowcount or 0)
