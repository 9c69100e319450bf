"""AccountRepository protocol for account persistence.

Port (interface) for hexagonal architecture. The recovery core only needs
lookup by e-mail and a password update.

Every method returns a Result; storage exceptions never escape an adapter.
"""

from typing import Protocol
from uuid import UUID

from recovery.core.result import Result
from recovery.domain.entities.account import Account
from recovery.domain.errors import PersistenceError


class AccountRepository(Protocol):
    """Account repository protocol (port).

    Methods:
        find_by_email: Retrieve account by e-mail (case-insensitive)
        update_password: Replace the stored password hash
        save: Create new account
    """

    async def find_by_email(
        self, email: str
    ) -> Result[Account | None, PersistenceError]:
        """Find account by e-mail address.

        Args:
            email: E-mail address (case-insensitive).

        Returns:
            Success(Account) if found, Success(None) otherwise.
            Failure(PersistenceError) on storage failure.
        """
        ...

    async def update_password(
        self, account_id: UUID, password_hash: str
    ) -> Result[None, PersistenceError]:
        """Replace the account's password hash and commit.

        The commit also covers earlier writes on the same unit of work (the
        token consume during redemption), so both land or neither does.

        Args:
            account_id: Account identifier.
            password_hash: Bcrypt hash of the new password.

        Returns:
            Success(None), or Failure(PersistenceError) after rolling back.
        """
        ...

    async def save(self, account: Account) -> Result[None, PersistenceError]:
        """Create new account.

        Args:
            account: Account entity to persist.

        Returns:
            Success(None), or Failure(PersistenceError) (e.g. duplicate e-mail).
        """
        ...
