"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (PASSWORD_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND, TOKEN_*)
- Delivery errors (EMAIL_*)
- Persistence errors (PERSISTENCE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    PASSWORD_POLICY_VIOLATION = "password_policy_violation"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    ACCOUNT_NOT_FOUND = "account_not_found"
    TOKEN_INVALID_OR_EXPIRED = "token_invalid_or_expired"

    # Delivery errors
    EMAIL_DELIVERY_FAILED = "email_delivery_failed"

    # Persistence errors
    PERSISTENCE_FAILED = "persistence_failed"
    PERSISTENCE_INCONSISTENT = "persistence_inconsistent"
