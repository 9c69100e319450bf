"""In-memory repository implementations (development and tests)."""

from recovery.infrastructure.persistence.memory.account_repository import (
    InMemoryAccountRepository,
)
from recovery.infrastructure.persistence.memory.recovery_token_repository import (
    InMemoryRecoveryTokenRepository,
)

__all__ = ["InMemoryAccountRepository", "InMemoryRecoveryTokenRepository"]
