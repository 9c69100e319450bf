"""Centralized constants for internal implementation details.

These are fixed implementation details, NOT environment-specific
configuration. For tunable settings use `recovery/core/config.py`.
"""

# =============================================================================
# Token Lengths
# =============================================================================

TOKEN_BYTES: int = 32
"""Number of bytes for recovery token generation (32 bytes = 256 bits)."""

TOKEN_HEX_LENGTH: int = 64
"""Length of hex-encoded token string (TOKEN_BYTES * 2)."""

TOKEN_LOG_PREFIX_LENGTH: int = 8
"""Number of token characters that may appear in logs."""


# =============================================================================
# Password Policy
# =============================================================================

PASSWORD_MIN_LENGTH: int = 8
"""Minimum password length accepted on redemption."""

BCRYPT_ROUNDS_DEFAULT: int = 12
"""Default bcrypt work factor (cost parameter)."""


# =============================================================================
# Recovery Defaults
# =============================================================================

RECOVERY_TOKEN_EXPIRE_MINUTES_DEFAULT: int = 30
"""Default recovery token lifetime in minutes."""

SMTP_TIMEOUT_SECONDS_DEFAULT: float = 10.0
"""Default SMTP connect/send timeout in seconds."""
