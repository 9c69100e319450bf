"""Application service factories.

RecoveryService is request-scoped: its repositories share the request's
database session. Everything else it needs is an app-scoped singleton.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Depends

from recovery.core.config import get_settings
from recovery.core.container.infrastructure import (
    get_logger,
    get_notifier,
    get_password_service,
    get_recovery_token_service,
)
from recovery.core.container.repositories import (
    get_account_repository,
    get_recovery_token_repository,
)
from recovery.domain.protocols import AccountRepository, RecoveryTokenRepository

if TYPE_CHECKING:
    from recovery.application.services import RecoveryConfig, RecoveryService


@lru_cache()
def get_recovery_config() -> "RecoveryConfig":
    """Build RecoveryConfig from settings once per process."""
    from recovery.application.services import RecoveryConfig

    settings = get_settings()
    return RecoveryConfig(
        expire_minutes=settings.recovery_token_expire_minutes,
        recovery_url_base=settings.recovery_url_base,
        single_use=settings.recovery_token_single_use,
    )


async def get_recovery_service(
    account_repo: AccountRepository = Depends(get_account_repository),
    token_repo: RecoveryTokenRepository = Depends(get_recovery_token_repository),
) -> "RecoveryService":
    """Get RecoveryService (request-scoped).

    Usage:
        @router.post("/auth/recover-token", status_code=204)
        async def recover(
            service: RecoveryService = Depends(get_recovery_service),
        ): ...
    """
    from recovery.application.services import RecoveryService

    return RecoveryService(
        account_repo=account_repo,
        token_repo=token_repo,
        token_service=get_recovery_token_service(),
        password_service=get_password_service(),
        notifier=get_notifier(),
        logger=get_logger(),
        config=get_recovery_config(),
    )
