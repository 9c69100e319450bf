"""Application environment types.

Used by Settings to pick environment-specific adapters (log renderer,
notifier).

Environments:
- DEVELOPMENT: Local development, human-readable logs, stub notifier
- TESTING: Automated test execution
- CI: Continuous integration
- PRODUCTION: Real SMTP delivery, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
