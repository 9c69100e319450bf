"""Security adapters: password hashing and recovery token generation."""

from recovery.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from recovery.infrastructure.security.recovery_token_service import (
    RecoveryTokenService,
)

__all__ = ["BcryptPasswordService", "RecoveryTokenService"]
