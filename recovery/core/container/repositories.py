"""Repository dependency factories (request-scoped).

Each request gets fresh repository instances sharing one session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from recovery.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from recovery.infrastructure.persistence.repositories import (
        SQLAlchemyAccountRepository,
        SQLAlchemyRecoveryTokenRepository,
    )


async def get_account_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "SQLAlchemyAccountRepository":
    """Get account repository bound to the request session."""
    from recovery.infrastructure.persistence.repositories import (
        SQLAlchemyAccountRepository,
    )

    return SQLAlchemyAccountRepository(session=session)


async def get_recovery_token_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "SQLAlchemyRecoveryTokenRepository":
    """Get recovery token repository bound to the request session."""
    from recovery.infrastructure.persistence.repositories import (
        SQLAlchemyRecoveryTokenRepository,
    )

    return SQLAlchemyRecoveryTokenRepository(session=session)
