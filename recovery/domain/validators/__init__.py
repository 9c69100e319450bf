"""Domain validators."""

from recovery.domain.validators.password_policy import (
    PASSWORD_MIN_LENGTH,
    check_password_policy,
)

__all__ = ["PASSWORD_MIN_LENGTH", "check_password_policy"]
