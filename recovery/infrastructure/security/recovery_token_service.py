"""Recovery token generation.

Tokens are 32 random bytes from the OS CSPRNG, hex encoded (64 characters,
256 bits of entropy). They are stored as-is: an unguessable value needs no
hashing, and redemption looks them up by equality.
"""

import secrets

from recovery.core.constants import TOKEN_BYTES


class RecoveryTokenService:
    """Implements RecoveryTokenServiceProtocol.

    Example:
        >>> token = RecoveryTokenService().generate_token()
        >>> len(token)
        64
    """

    def __init__(self, token_bytes: int = TOKEN_BYTES) -> None:
        self._token_bytes = token_bytes

    def generate_token(self) -> str:
        """Return a fresh lowercase hex token."""
        return secrets.token_hex(self._token_bytes)
