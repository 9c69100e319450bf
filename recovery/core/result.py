"""Result types for railway-oriented programming.

Recovery operations can fail in several expected ways (unknown account,
expired token, weak password, undeliverable e-mail). Those outcomes are
returned as values instead of raised, so every caller has to handle them.

Usage:
    result = await service.redeem(token, new_password)
    match result:
        case Success():
            ...
        case Failure(error=InvalidOrExpiredTokenError()):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
