"""SQLAlchemy models.

Importing this package registers every table on BaseModel.metadata.
"""

from recovery.infrastructure.persistence.models.account import AccountModel
from recovery.infrastructure.persistence.models.recovery_token import (
    RecoveryTokenModel,
)

__all__ = ["AccountModel", "RecoveryTokenModel"]
