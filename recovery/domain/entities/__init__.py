"""Domain entities."""

from recovery.domain.entities.account import Account
from recovery.domain.entities.recovery_token import RecoveryToken

__all__ = ["Account", "RecoveryToken"]
