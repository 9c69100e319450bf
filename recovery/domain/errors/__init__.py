"""Domain errors package.

Usage:
    from recovery.domain.errors import (
        AccountNotFoundError,
        InvalidOrExpiredTokenError,
    )
"""

from recovery.domain.errors.recovery_error import (
    INVALID_OR_EXPIRED_TOKEN_MESSAGE,
    AccountNotFoundError,
    EmailDeliveryFailedError,
    InvalidOrExpiredTokenError,
    PasswordPolicyViolationError,
    PersistenceError,
    RecoveryError,
)

__all__ = [
    "INVALID_OR_EXPIRED_TOKEN_MESSAGE",
    "AccountNotFoundError",
    "EmailDeliveryFailedError",
    "InvalidOrExpiredTokenError",
    "PasswordPolicyViolationError",
    "PersistenceError",
    "RecoveryError",
]
