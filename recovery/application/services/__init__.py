"""Application services."""

from recovery.application.services.recovery_service import (
    RecoveryConfig,
    RecoveryService,
)

__all__ = ["RecoveryConfig", "RecoveryService"]
