"""Password policy applied when a recovery token is redeemed.

The policy is a single rule: at least 8 characters. There is no upper
bound and no composition requirement.
"""

from recovery.core.constants import PASSWORD_MIN_LENGTH
from recovery.core.result import Failure, Result, Success
from recovery.domain.errors import PasswordPolicyViolationError


def check_password_policy(
    password: str,
) -> Result[str, PasswordPolicyViolationError]:
    """Validate a new password against the policy.

    Args:
        password: Plaintext candidate password.

    Returns:
        Success(password) if acceptable, Failure naming the unmet
        constraint otherwise.

    Example:
        >>> check_password_policy("longenough1")
        Success(value='longenough1')
        >>> check_password_policy("short").error.constraint
        'min_length'
    """
    if len(password) < PASSWORD_MIN_LENGTH:
        return Failure(
            error=PasswordPolicyViolationError(
                message=f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
                constraint="min_length",
                details={"min_length": str(PASSWORD_MIN_LENGTH)},
            )
        )
    return Success(value=password)
