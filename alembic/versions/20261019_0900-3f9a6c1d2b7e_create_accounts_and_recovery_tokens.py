"""create_accounts_and_recovery_tokens

Revision ID: 3f9a6c1d2b7e
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f9a6c1d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create accounts and recovery_tokens tables."""
    op.create_table(
        "accounts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Unique lowercase e-mail address",
        ),
        sa.Column(
            "password_hash",
            sa.Text(),
            nullable=False,
            comment="Bcrypt password hash",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_accounts_email"), "accounts", ["email"], unique=True)

    op.create_table(
        "recovery_tokens",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "token",
            sa.String(length=64),
            nullable=False,
            comment="Random recovery token (64-char hex string)",
        ),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Account e-mail the token was issued for",
        ),
        sa.Column(
            "expiration",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Token is valid only while now < expiration",
        ),
        sa.Column(
            "consumed_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Timestamp when the token was redeemed (single-use mode)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_recovery_tokens_token"), "recovery_tokens", ["token"], unique=True
    )
    op.create_index(
        op.f("ix_recovery_tokens_email"), "recovery_tokens", ["email"], unique=False
    )
    op.create_index(
        "idx_recovery_tokens_cleanup", "recovery_tokens", ["expiration"], unique=False
    )


def downgrade() -> None:
    """Drop recovery_tokens and accounts tables."""
    op.drop_index("idx_recovery_tokens_cleanup", table_name="recovery_tokens")
    op.drop_index(op.f("ix_recovery_tokens_email"), table_name="recovery_tokens")
    op.drop_index(op.f("ix_recovery_tokens_token"), table_name="recovery_tokens")
    op.drop_table("recovery_tokens")
    op.drop_index(op.f("ix_accounts_email"), table_name="accounts")
    op.drop_table("accounts")
