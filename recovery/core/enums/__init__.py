"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from recovery.core.enums import ErrorCode, Environment
"""

from recovery.core.enums.environment import Environment
from recovery.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
