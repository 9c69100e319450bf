"""Integration tests for BcryptPasswordService and RecoveryTokenService.

Real bcrypt and real ``secrets`` (no mocking).
"""

import pytest

from recovery.infrastructure.security import BcryptPasswordService, RecoveryTokenService

@pytest.mark.integration
class TestRecoveryTokenServiceIntegration:
    """Token format and uniqueness."""

    def test_generate_token_is_64_hex_chars(self):
        token = RecoveryTokenService().generate_token()

        assert len(token) == 64
        assert all(c in "0123456789abcdef" for c in token)

    def test_generate_token_is_unique(self):
        """10,000 draws never collide (256 bits of entropy)."""
        service = RecoveryTokenService()

        tokens = {service.generate_token() for _ in range(10_000)}

        assert len(tokens) == 10_000

@pytest.mark.integration
class TestBcryptPasswordServiceIntegration:
    """Hash/verify round-trips with a real bcrypt."""

    def test_hash_and_verify_round_trip(self):
        service = BcryptPasswordService(cost_factor=4)

        password_hash = service.hash_password("correct horse")

        assert password_hash.startswith("$2b$04$")
        assert len(password_hash) == 60
        assert service.verify_password("correct horse", password_hash)
        assert not service.verify_password("wrong horse", password_hash)

    def test_same_password_hashes_differently(self):
        service = BcryptPasswordService(cost_factor=4)

        assert service.hash_password("same-secret") != service.hash_password(
            "same-secret"
        )

    def test_long_password_round_trip(self):
        """Passwords past bcrypt's 72-byte input limit hash and verify."""
        service = BcryptPasswordService(cost_factor=4)
        password = "p" * 100

        password_hash = service.hash_password(password)

        assert service.verify_password(password, password_hash)
        assert not service.verify_password("p" * 99, password_hash)

    def test_long_passwords_differing_after_72_bytes_do_not_match(self):
        service = BcryptPasswordService(cost_factor=4)
        prefix = "x" * 72

        password_hash = service.hash_password(prefix + "-first")

        assert not service.verify_password(prefix + "-second", password_hash)

    def test_multibyte_password_over_limit(self):
        """72 bytes is measured on UTF-8, not on characters."""
        service = BcryptPasswordService(cost_factor=4)
        password = "é" * 40

        assert service.verify_password(password, service.hash_password(password))

    def test_verify_malformed_hash_returns_false(self):
        service = BcryptPasswordService(cost_factor=4)

        assert service.verify_password("anything", "not-a-bcrypt-hash") is False

    @pytest.mark.parametrize("cost", [3, 32])
    def test_rejects_out_of_range_cost(self, cost):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost)
