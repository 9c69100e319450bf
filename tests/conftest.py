"""Pytest configuration shared by every test module.

Environment variables are set before any ``recovery`` import so the cached
Settings see the testing configuration (fast bcrypt, JSON logs).
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from datetime import UTC, datetime, timedelta  # noqa: E402
from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from recovery.application.services import RecoveryConfig, RecoveryService  # noqa: E402
from recovery.domain.entities import Account, RecoveryToken  # noqa: E402
from recovery.infrastructure.email import StubNotifier  # noqa: E402
from recovery.infrastructure.persistence.memory import (  # noqa: E402
    InMemoryAccountRepository,
    InMemoryRecoveryTokenRepository,
)
from recovery.infrastructure.security import (  # noqa: E402
    BcryptPasswordService,
    RecoveryTokenService,
)

OLD_PASSWORD = "old-password-123"
ACCOUNT_EMAIL = "user@example.com"


# =============================================================================
# Test helpers
# =============================================================================


def create_recovery_token(
    token: str = "a" * 64,
    email: str = ACCOUNT_EMAIL,
    expiration: datetime | None = None,
    consumed_at: datetime | None = None,
) -> RecoveryToken:
    """Build a RecoveryToken entity (default: live for 30 more minutes)."""
    now = datetime.now(UTC)
    return RecoveryToken(
        id=uuid7(),
        token=token,
        email=email,
        expiration=expiration or now + timedelta(minutes=30),
        created_at=now,
        consumed_at=consumed_at,
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """LoggerProtocol double; assert on calls via mock_logger.info etc."""
    return Mock()


@pytest.fixture
def password_service():
    """Real bcrypt at the minimum cost factor."""
    return BcryptPasswordService(cost_factor=4)


@pytest.fixture
def token_service():
    return RecoveryTokenService()


@pytest.fixture
def account(password_service):
    """Existing account with a known password."""
    return Account(
        id=uuid7(),
        email=ACCOUNT_EMAIL,
        password_hash=password_service.hash_password(OLD_PASSWORD),
    )


@pytest.fixture
def account_repo(account):
    return InMemoryAccountRepository([account])


@pytest.fixture
def token_repo():
    return InMemoryRecoveryTokenRepository()


@pytest.fixture
def notifier(mock_logger):
    return StubNotifier(logger=mock_logger)


@pytest.fixture
def recovery_config():
    return RecoveryConfig(
        expire_minutes=30,
        recovery_url_base="https://app.example.com/recover",
        single_use=True,
    )


@pytest.fixture
def recovery_service(
    account_repo,
    token_repo,
    token_service,
    password_service,
    notifier,
    mock_logger,
    recovery_config,
):
    """RecoveryService wired to in-memory stores and the stub notifier."""
    return RecoveryService(
        account_repo=account_repo,
        token_repo=token_repo,
        token_service=token_service,
        password_service=password_service,
        notifier=notifier,
        logger=mock_logger,
        config=recovery_config,
    )
