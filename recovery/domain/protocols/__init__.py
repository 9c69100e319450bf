"""Domain protocols (ports).

Infrastructure adapters satisfy these structurally; nothing inherits from
them.
"""

from recovery.domain.protocols.account_repository import AccountRepository
from recovery.domain.protocols.logger_protocol import LoggerProtocol
from recovery.domain.protocols.notifier_protocol import NotifierProtocol
from recovery.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from recovery.domain.protocols.recovery_token_repository import (
    RecoveryTokenRepository,
)
from recovery.domain.protocols.recovery_token_service_protocol import (
    RecoveryTokenServiceProtocol,
)

__all__ = [
    "AccountRepository",
    "LoggerProtocol",
    "NotifierProtocol",
    "PasswordHashingProtocol",
    "RecoveryTokenRepository",
    "RecoveryTokenServiceProtocol",
]
