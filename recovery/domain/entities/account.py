"""Account domain entity.

Owned by the account store; the recovery core only reads the e-mail and
replaces the password hash.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class Account:
    """User account referenced by recovery tokens.

    Attributes:
        id: Unique account identifier.
        email: Unique, lowercase e-mail address.
        password_hash: Bcrypt hash of the current password (never plaintext).
        created_at: Timestamp when the account was created.
        updated_at: Timestamp when the account was last updated.
    """

    id: UUID
    email: str
    password_hash: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
