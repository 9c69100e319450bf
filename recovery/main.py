"""FastAPI application entry point.

Run with:
    uvicorn recovery.main:app
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from recovery.core.config import get_settings
from recovery.core.container import get_database, get_logger
from recovery.presentation.middleware import TraceMiddleware
from recovery.presentation.routers import recovery_router, system_router
from recovery.presentation.routers.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup; dispose the connection pool on shutdown."""
    settings = get_settings()
    get_logger().info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
        recovery_single_use=settings.recovery_token_single_use,
    )
    yield
    await get_database().close()


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Password recovery tokens: issue by e-mail, redeem once",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.add_middleware(TraceMiddleware)
    register_exception_handlers(app)
    app.include_router(system_router)
    app.include_router(recovery_router)
    return app


app = create_app()
