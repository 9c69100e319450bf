"""Domain enums."""

from recovery.domain.enums.recovery_token_state import RecoveryTokenState

__all__ = ["RecoveryTokenState"]
