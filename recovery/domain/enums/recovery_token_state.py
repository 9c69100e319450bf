"""Recovery token state.

A recovery token is in exactly one of three states at any instant:

- LIVE: not consumed and not yet expired (``now < expiration``)
- CONSUMED: redeemed once (single-use mode only)
- EXPIRED: ``now >= expiration`` and never consumed

LIVE → EXPIRED is a pure function of wall-clock time. LIVE → CONSUMED is the
only stored transition and is performed atomically by the token repository.
"""

from enum import Enum


class RecoveryTokenState(str, Enum):
    """Lifecycle state of a recovery token."""

    LIVE = "live"
    CONSUMED = "consumed"
    EXPIRED = "expired"
