"""RecoveryToken domain entity.

One outstanding (or expired, or consumed) password recovery attempt.

Business Rules:
    - ``token`` is a high-entropy random string, unique across all records
    - ``expiration`` is set once at issuance (issue time + window) and never
      changes
    - A token is usable only while ``now < expiration`` (strict); a token
      expiring exactly at ``now`` is already invalid
    - ``consumed_at`` is set once, by an atomic conditional update, when the
      token is redeemed in single-use mode
    - Several live tokens may exist for the same e-mail; issuing a new token
      never invalidates older ones
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from recovery.domain.enums import RecoveryTokenState


@dataclass(frozen=True, slots=True, kw_only=True)
class RecoveryToken:
    """Recovery token record.

    Attributes:
        id: Identity assigned by the store.
        token: 64-character hex token sent to the user.
        email: Account the token authorizes recovery for (pointer only).
        expiration: Absolute UTC timestamp after which the token is unusable.
        created_at: Issuance timestamp.
        consumed_at: Redemption timestamp (None until consumed).

    Example:
        >>> token.state(datetime.now(UTC))
        <RecoveryTokenState.LIVE: 'live'>
    """

    id: UUID
    token: str
    email: str
    expiration: datetime
    created_at: datetime
    consumed_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        """Return True once ``now`` has reached the expiration timestamp."""
        return now >= self.expiration

    def is_consumed(self) -> bool:
        """Return True if the token has been redeemed."""
        return self.consumed_at is not None

    def is_live(self, now: datetime) -> bool:
        """Return True if the token can still be redeemed at ``now``."""
        return not self.is_consumed() and not self.is_expired(now)

    def state(self, now: datetime) -> RecoveryTokenState:
        """Return the lifecycle state at ``now``.

        Consumption wins over expiry: a token redeemed before it expired
        reports CONSUMED forever.
        """
        if self.is_consumed():
            return RecoveryTokenState.CONSUMED
        if self.is_expired(now):
            return RecoveryTokenState.EXPIRED
        return RecoveryTokenState.LIVE
