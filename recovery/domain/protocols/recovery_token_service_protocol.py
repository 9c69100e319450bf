"""RecoveryTokenServiceProtocol - token generation port.

Infrastructure provides the concrete implementation (RecoveryTokenService).
"""

from typing import Protocol


class RecoveryTokenServiceProtocol(Protocol):
    """Protocol for recovery token generation.

    Tokens carry no relationship to the e-mail, the clock or any other
    predictable seed.

    Implementations:
        - RecoveryTokenService: recovery/infrastructure/security/recovery_token_service.py
    """

    def generate_token(self) -> str:
        """Generate an unguessable recovery token.

        Returns:
            64-character hex string (32 bytes of entropy).
        """
        ...
