"""Unit tests for container adapter selection."""

from unittest.mock import patch

import pytest

from recovery.core.config import Settings
from recovery.core.container import (
    get_logger,
    get_notifier,
    get_password_service,
    get_recovery_config,
)
from recovery.infrastructure.email import SmtpNotifier, StubNotifier


@pytest.fixture(autouse=True)
def clear_caches():
    yield
    for factory in (get_logger, get_notifier, get_password_service, get_recovery_config):
        factory.cache_clear()


def _patch_settings(**values):
    settings = Settings(_env_file=None, **values)
    return patch("recovery.core.container.infrastructure.get_settings", return_value=settings)


@pytest.mark.unit
class TestContainer:
    """Factories pick adapters from Settings."""

    def test_notifier_is_stub_outside_production(self):
        with _patch_settings(environment="testing"):
            assert isinstance(get_notifier(), StubNotifier)

    def test_notifier_is_smtp_in_production(self):
        with _patch_settings(environment="production", smtp_host="smtp.example.com"):
            assert isinstance(get_notifier(), SmtpNotifier)

    def test_password_service_uses_configured_rounds(self):
        with _patch_settings(bcrypt_rounds=5):
            assert get_password_service().cost_factor == 5

    def test_recovery_config_from_settings(self):
        settings = Settings(
            _env_file=None,
            recovery_token_expire_minutes=45,
            recovery_token_single_use=False,
        )
        with patch("recovery.core.container.services.get_settings", return_value=settings):
            config = get_recovery_config()

        assert config.expire_minutes == 45
        assert config.single_use is False
