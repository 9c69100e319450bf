"""Core errors package.

Usage:
    from recovery.core.errors import DomainError, ValidationError, NotFoundError
"""

from recovery.core.errors.common_errors import NotFoundError, ValidationError
from recovery.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
]
