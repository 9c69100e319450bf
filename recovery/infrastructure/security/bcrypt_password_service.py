"""Bcrypt password hashing adapter.

Implements PasswordHashingProtocol structurally. The cost factor comes from
``Settings.bcrypt_rounds``; tests run with the bcrypt minimum of 4 to stay
fast.

bcrypt only reads the first 72 bytes of its input (bcrypt>=5 rejects longer
input outright). Passwords above that limit are reduced to the base64 of
their SHA-256 digest (44 bytes) before hashing and before verification, so
any length is accepted and every byte counts.
"""

import base64
import hashlib

import bcrypt

MIN_COST_FACTOR = 4
MAX_COST_FACTOR = 31
BCRYPT_MAX_INPUT_BYTES = 72


def _bcrypt_input(password: str) -> bytes:
    """Encode ``password`` into bytes bcrypt accepts."""
    raw = password.encode("utf-8")
    if len(raw) <= BCRYPT_MAX_INPUT_BYTES:
        return raw
    return base64.b64encode(hashlib.sha256(raw).digest())


class BcryptPasswordService:
    """Hash and verify passwords with bcrypt.

    Usage:
        service = BcryptPasswordService(cost_factor=settings.bcrypt_rounds)
        password_hash = service.hash_password("correct horse")
        assert service.verify_password("correct horse", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize with a bcrypt cost factor.

        Args:
            cost_factor: log2 of the key expansion rounds (4-31). Each +1
                doubles hashing time.

        Raises:
            ValueError: If the cost factor is outside what bcrypt accepts.
        """
        if not MIN_COST_FACTOR <= cost_factor <= MAX_COST_FACTOR:
            msg = f"Cost factor must be between {MIN_COST_FACTOR} and {MAX_COST_FACTOR}"
            raise ValueError(msg)
        self._cost_factor = cost_factor

    @property
    def cost_factor(self) -> int:
        return self._cost_factor

    def hash_password(self, password: str) -> str:
        """Return a salted bcrypt hash (``$2b$<cost>$...``, 60 characters).

        Every call uses a fresh salt, so hashing the same password twice
        yields different strings.
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(_bcrypt_input(password), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against ``password_hash``.

        Returns False (never raises) for malformed hashes.
        """
        try:
            return bcrypt.checkpw(
                _bcrypt_input(password), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            return False
