"""SQLAlchemyAccountRepository - account persistence.

Adapter for hexagonal architecture: maps between the domain Account
entity and AccountModel. Database exceptions are caught and returned as
Failure(PersistenceError).
"""

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from recovery.core.result import Failure, Result, Success
from recovery.domain.entities.account import Account
from recovery.domain.errors import PersistenceError
from recovery.infrastructure.persistence.models.account import AccountModel


def _failure(operation: str, error: SQLAlchemyError) -> Failure[PersistenceError]:
    return Failure(
        error=PersistenceError(
            message=f"Failed to {operation} account: {type(error).__name__}",
            details={"operation": operation, "error_type": type(error).__name__},
        )
    )


class SQLAlchemyAccountRepository:
    """SQLAlchemy implementation of AccountRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def find_by_email(
        self, email: str
    ) -> Result[Account | None, PersistenceError]:
        """Find account by e-mail (case-insensitive).

        Args:
            email: E-mail address.

        Returns:
            Success(Account) if found, Success(None) otherwise.
        """
        stmt = (
            select(AccountModel)
            .where(AccountModel.email == email.lower())
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            return _failure("find", e)
        if model is None:
            return Success(value=None)
        return Success(value=self._to_domain(model))

    async def update_password(
        self, account_id: UUID, password_hash: str
    ) -> Result[None, PersistenceError]:
        """Replace the password hash in a single UPDATE and commit.

        Pending writes on the session (a token consume) commit with it; on
        error both are rolled back.

        Args:
            account_id: Account identifier.
            password_hash: New bcrypt hash.
        """
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id)
            .values(password_hash=password_hash)
            .execution_options(synchronize_session=False)
        )
        try:
            await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return _failure("update", e)
        return Success(value=None)

    async def save(self, account: Account) -> Result[None, PersistenceError]:
        """Create new account.

        A duplicate e-mail violates the unique constraint and is reported as
        PersistenceError.
        """
        model = AccountModel(
            id=account.id,
            email=account.email.lower(),
            password_hash=account.password_hash,
        )
        try:
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        except SQLAlchemyError as e:
            await self.session.rollback()
            return _failure("save", e)
        return Success(value=None)

    def _to_domain(self, model: AccountModel) -> Account:
        """Convert database model to domain entity."""
        return Account(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
