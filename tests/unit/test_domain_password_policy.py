"""Unit tests for the recovery password policy (minimum length 8)."""

import pytest

from recovery.core.enums import ErrorCode
from recovery.core.result import Failure, Success
from recovery.domain.errors import PasswordPolicyViolationError
from recovery.domain.validators import PASSWORD_MIN_LENGTH, check_password_policy


@pytest.mark.unit
class TestCheckPasswordPolicy:
    """Tests for check_password_policy."""

    def test_minimum_length_is_eight(self):
        assert PASSWORD_MIN_LENGTH == 8

    @pytest.mark.parametrize("password", ["", "a", "1234567", "seven!!"])
    def test_rejects_short_passwords(self, password):
        result = check_password_policy(password)

        assert isinstance(result, Failure)
        assert isinstance(result.error, PasswordPolicyViolationError)
        assert result.error.code == ErrorCode.PASSWORD_POLICY_VIOLATION
        assert result.error.constraint == "min_length"
        assert result.error.field == "password"
        assert "8" in result.error.message

    @pytest.mark.parametrize(
        "password",
        ["12345678", "correct horse battery staple", "        ", "ñandú-ñandú"],
    )
    def test_accepts_eight_or_more_characters(self, password):
        """No composition rules: any 8+ characters pass."""
        assert check_password_policy(password) == Success(value=password)
