"""Persistence adapters (SQLAlchemy and in-memory)."""

from recovery.infrastructure.persistence.base import BaseModel, BaseMutableModel
from recovery.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "BaseMutableModel", "Database"]
