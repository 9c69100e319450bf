"""SQLAlchemy repository implementations."""

from recovery.infrastructure.persistence.repositories.account_repository import (
    SQLAlchemyAccountRepository,
)
from recovery.infrastructure.persistence.repositories.recovery_token_repository import (
    SQLAlchemyRecoveryTokenRepository,
)

__all__ = ["SQLAlchemyAccountRepository", "SQLAlchemyRecoveryTokenRepository"]
