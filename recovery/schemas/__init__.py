"""Request/response schemas (Pydantic)."""

from recovery.schemas.recovery_schemas import NewPasswordRequest, RecoverTokenRequest

__all__ = ["NewPasswordRequest", "RecoverTokenRequest"]
