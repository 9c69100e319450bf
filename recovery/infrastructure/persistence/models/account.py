"""Account database model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from recovery.infrastructure.persistence.base import BaseMutableModel


class AccountModel(BaseMutableModel):
    """Account credentials.

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        email: Unique lowercase e-mail address (indexed)
        password_hash: Bcrypt hash (NEVER plaintext)
    """

    __tablename__ = "accounts"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique lowercase e-mail address",
    )

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Bcrypt password hash",
    )

    def __repr__(self) -> str:
        """String representation for debugging (no credentials)."""
        return f"<AccountModel(id={self.id}, email={self.email})>"
