"""Infrastructure dependency factories.

Application-scoped singletons (``lru_cache``):
- Database (PostgreSQL)
- Logging (structlog console)
- Password hashing (bcrypt)
- Recovery token generation
- Recovery e-mail (SMTP / stub)

Plus the request-scoped database session.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from recovery.core.config import get_settings
from recovery.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from recovery.domain.protocols import (
        LoggerProtocol,
        NotifierProtocol,
        PasswordHashingProtocol,
        RecoveryTokenServiceProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Prefer get_db_session() for per-request sessions.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from recovery.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    level = "DEBUG" if settings.debug else settings.log_level
    return ConsoleAdapter(use_json=not settings.is_development, level=level)


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get bcrypt password service singleton (cost from BCRYPT_ROUNDS)."""
    from recovery.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_recovery_token_service() -> "RecoveryTokenServiceProtocol":
    """Get recovery token generator singleton."""
    from recovery.infrastructure.security import RecoveryTokenService

    return RecoveryTokenService()


@lru_cache()
def get_notifier() -> "NotifierProtocol":
    """Get recovery e-mail notifier singleton.

    Container owns adapter selection:
        - production: SmtpNotifier
        - development/testing/ci: StubNotifier (logs to console)
    """
    from recovery.infrastructure.email import SmtpNotifier, StubNotifier

    settings = get_settings()
    if settings.is_production:
        return SmtpNotifier(
            host=settings.smtp_host,
            port=settings.smtp_port,
            mail_from=settings.mail_from,
            logger=get_logger(),
            username=settings.smtp_username,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
            timeout=settings.smtp_timeout_seconds,
        )
    return StubNotifier(logger=get_logger())


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.

    Usage:
        @router.post("/things")
        async def create(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
