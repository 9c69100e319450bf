"""Container module - centralized dependency injection.

Re-exports every factory so callers import from one place:

    from recovery.core.container import get_logger, get_recovery_service

- infrastructure: app-scoped singletons (database, logging, hashing, mail)
  and the request-scoped database session
- repositories: request-scoped repositories sharing that session
- services: RecoveryService wiring
"""

from recovery.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_notifier,
    get_password_service,
    get_recovery_token_service,
)
from recovery.core.container.repositories import (
    get_account_repository,
    get_recovery_token_repository,
)
from recovery.core.container.services import get_recovery_config, get_recovery_service

__all__ = [
    "get_account_repository",
    "get_database",
    "get_db_session",
    "get_logger",
    "get_notifier",
    "get_password_service",
    "get_recovery_config",
    "get_recovery_service",
    "get_recovery_token_repository",
    "get_recovery_token_service",
]
