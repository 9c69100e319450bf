"""Common error classes reused by domain-specific errors.

Error Types:
- ValidationError: Input validation failures (names the offending field)
- NotFoundError: Resource not found
"""

from dataclasses import dataclass

from recovery.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Account, RecoveryToken).
        details: Additional context.
    """

    resource_type: str
