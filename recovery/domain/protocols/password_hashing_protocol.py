"""Password hashing protocol for domain layer.

Infrastructure layer provides concrete implementations (bcrypt).
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Implementations:
        - BcryptPasswordService: bcrypt with configurable cost factor
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Returns:
            One-way salted hash; the same password yields different hashes.
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Return True if ``password`` matches ``password_hash``."""
        ...
