"""Recovery token database model.

Security:
    - token: Random 32-byte hex string (unguessable, unique)
    - expiration: issue time + configured window, never updated
    - consumed_at: set once by an atomic conditional UPDATE on redemption
"""

from datetime import datetime

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from recovery.core.constants import TOKEN_HEX_LENGTH
from recovery.infrastructure.persistence.base import BaseModel


class RecoveryTokenModel(BaseModel):
    """Recovery token row.

    Inherits from BaseModel (NOT BaseMutableModel): rows are immutable apart
    from the single consumed_at write.

    Indexes:
        - token: unique lookup
        - email: tokens per account
        - idx_recovery_tokens_cleanup: (expiration) for purging expired rows

    Note:
        ``email`` is a plain column rather than a foreign key; a token points
        at an account, it does not own it.
    """

    __tablename__ = "recovery_tokens"

    token: Mapped[str] = mapped_column(
        String(TOKEN_HEX_LENGTH),
        nullable=False,
        unique=True,
        index=True,
        comment="Random recovery token (64-char hex string)",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Account e-mail the token was issued for",
    )

    expiration: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Token is valid only while now < expiration",
    )

    consumed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="Timestamp when the token was redeemed (single-use mode)",
    )

    __table_args__ = (Index("idx_recovery_tokens_cleanup", "expiration"),)

    def __repr__(self) -> str:
        """String representation for debugging (token omitted)."""
        return (
            f"<RecoveryTokenModel("
            f"id={self.id}, "
            f"email={self.email}, "
            f"expiration={self.expiration}, "
            f"consumed={self.consumed_at is not None}"
            f")>"
        )
