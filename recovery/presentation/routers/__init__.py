"""HTTP routers."""

from recovery.presentation.routers.recovery import recovery_router
from recovery.presentation.routers.system import system_router

__all__ = ["recovery_router", "system_router"]
