"""Recovery domain errors.

Every failure of the recovery flow is one of these types. They are
returned inside ``Failure``, never raised.

Error Categories:
    - Existence: AccountNotFoundError, InvalidOrExpiredTokenError
    - Validation: PasswordPolicyViolationError
    - Delivery: EmailDeliveryFailedError
    - Infrastructure: PersistenceError

Existence errors carry a generic message: an unknown token, an expired
token and an already-consumed token all read the same to the caller.

Usage:
    from recovery.core.result import Failure
    from recovery.domain.errors import InvalidOrExpiredTokenError

    return Failure(error=InvalidOrExpiredTokenError())
"""

from dataclasses import dataclass

from recovery.core.enums import ErrorCode
from recovery.core.errors import DomainError, NotFoundError, ValidationError

INVALID_OR_EXPIRED_TOKEN_MESSAGE = "Recovery token is invalid or has expired"
ACCOUNT_NOT_FOUND_MESSAGE = "No account is registered for this e-mail address"


@dataclass(frozen=True, slots=True, kw_only=True)
class AccountNotFoundError(NotFoundError):
    """No account exists for the requested e-mail."""

    code: ErrorCode = ErrorCode.ACCOUNT_NOT_FOUND
    message: str = ACCOUNT_NOT_FOUND_MESSAGE
    resource_type: str = "Account"


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidOrExpiredTokenError(NotFoundError):
    """Token is unknown, expired or already consumed."""

    code: ErrorCode = ErrorCode.TOKEN_INVALID_OR_EXPIRED
    message: str = INVALID_OR_EXPIRED_TOKEN_MESSAGE
    resource_type: str = "RecoveryToken"


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordPolicyViolationError(ValidationError):
    """New password does not satisfy the password policy.

    Attributes:
        constraint: Name of the unmet rule (e.g. ``min_length``).
    """

    code: ErrorCode = ErrorCode.PASSWORD_POLICY_VIOLATION
    field: str | None = "password"
    constraint: str


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailDeliveryFailedError(DomainError):
    """The notifier could not hand the recovery e-mail to the transport."""

    code: ErrorCode = ErrorCode.EMAIL_DELIVERY_FAILED


@dataclass(frozen=True, slots=True, kw_only=True)
class PersistenceError(DomainError):
    """Storage failure or storage inconsistency."""

    code: ErrorCode = ErrorCode.PERSISTENCE_FAILED


type RecoveryError = (
    AccountNotFoundError
    | InvalidOrExpiredTokenError
    | PasswordPolicyViolationError
    | EmailDeliveryFailedError
    | PersistenceError
)
