"""In-memory account storage."""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID

from recovery.core.result import Failure, Result, Success
from recovery.domain.entities.account import Account
from recovery.domain.errors import PersistenceError


class InMemoryAccountRepository:
    """Dict-backed AccountRepository keyed by lower-cased e-mail."""

    def __init__(self, accounts: list[Account] | None = None) -> None:
        """Seed the store.

        Args:
            accounts: Initial accounts (optional).
        """
        self._accounts: dict[str, Account] = {}
        for account in accounts or []:
            self._accounts[account.email.lower()] = account

    async def find_by_email(
        self, email: str
    ) -> Result[Account | None, PersistenceError]:
        """Look up an account by e-mail, ignoring case."""
        return Success(value=self._accounts.get(email.lower()))

    async def update_password(
        self, account_id: UUID, password_hash: str
    ) -> Result[None, PersistenceError]:
        """Replace the hash of the account with ``account_id``.

        Unknown ids are a no-op, matching an UPDATE that matches no row.
        """
        for email, account in self._accounts.items():
            if account.id == account_id:
                self._accounts[email] = replace(
                    account,
                    password_hash=password_hash,
                    updated_at=datetime.now(UTC),
                )
                break
        return Success(value=None)

    async def save(self, account: Account) -> Result[None, PersistenceError]:
        """Add ``account``; an e-mail already present is a PersistenceError."""
        key = account.email.lower()
        if key in self._accounts:
            return Failure(
                error=PersistenceError(
                    message="Account already exists",
                    details={"operation": "save"},
                )
            )
        self._accounts[key] = account
        return Success(value=None)
